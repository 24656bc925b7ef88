"""
Credential Processor Configuration
==================================
Built-in defaults, overridable from the environment.
"""

import os

# PBKDF2
PBKDF2_HASH_BYTES = int(os.getenv("CREDPROC_PBKDF2_HASH_BYTES", "32"))
PBKDF2_SALT_BYTES = int(os.getenv("CREDPROC_PBKDF2_SALT_BYTES", "16"))
PBKDF2_DIGEST = os.getenv("CREDPROC_PBKDF2_DIGEST", "sha512")
# Tune so that hashing takes about a second
PBKDF2_ITERATIONS = int(os.getenv("CREDPROC_PBKDF2_ITERATIONS", "777777"))

# scrypt
SCRYPT_KEY_LENGTH = int(os.getenv("CREDPROC_SCRYPT_KEY_LENGTH", "64"))
SCRYPT_SALT_BYTES = int(os.getenv("CREDPROC_SCRYPT_SALT_BYTES", "16"))
SCRYPT_COST = int(os.getenv("CREDPROC_SCRYPT_COST", "16384"))  # power of two > 1
SCRYPT_BLOCK_SIZE = int(os.getenv("CREDPROC_SCRYPT_BLOCK_SIZE", "8"))
SCRYPT_PARALLELIZATION = int(os.getenv("CREDPROC_SCRYPT_PARALLELIZATION", "1"))
# Error when roughly 128 * cost * block_size > maxmem
SCRYPT_MAXMEM = int(os.getenv("CREDPROC_SCRYPT_MAXMEM", str(32 * 1024 * 1024)))

# bcrypt
BCRYPT_SALT_ROUNDS = int(os.getenv("CREDPROC_BCRYPT_SALT_ROUNDS", "10"))

# Argon2 (argon2-cffi PasswordHasher defaults)
ARGON2_TIME_COST = int(os.getenv("CREDPROC_ARGON2_TIME_COST", "3"))
ARGON2_MEMORY_COST = int(os.getenv("CREDPROC_ARGON2_MEMORY_COST", "65536"))  # KiB
ARGON2_PARALLELISM = int(os.getenv("CREDPROC_ARGON2_PARALLELISM", "4"))
ARGON2_HASH_LEN = 32
ARGON2_SALT_LEN = 16
ARGON2_TYPE = os.getenv("CREDPROC_ARGON2_TYPE", "id")

# Algorithms the factory can select
SUPPORTED_ALGORITHMS = ("pbkdf2", "scrypt", "bcrypt", "argon2")
