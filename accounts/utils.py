import secrets

RESET_TOKEN_BYTES = 32


def generate_reset_token(nbytes=RESET_TOKEN_BYTES):
    """Random hex token, 64 characters for the default size"""
    return secrets.token_hex(nbytes)
