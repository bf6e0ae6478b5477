"""
Print a pbkdf2_sha256 hash for ADMIN_PASSWORD_HASH.

    python -m storefront.scripts.hash_admin_password
    python -m storefront.scripts.hash_admin_password "my-password"
"""
import sys
from getpass import getpass

from storefront.core.security import hash_password, verify_password


def main(argv: list[str]) -> int:
    password = argv[1] if len(argv) > 1 else getpass("Admin password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1

    hashed = hash_password(password)
    if not verify_password(password, hashed):
        print("Generated hash did not verify; nothing printed", file=sys.stderr)
        return 1

    print(f"ADMIN_PASSWORD_HASH={hashed}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
