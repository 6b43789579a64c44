import hashlib


def generate_token(secret: str, query: str) -> str:
    """
    Derive the request token for a canonical query string.

    Args:
        secret: API secret, prepended to the query without a separator
        query: canonical query string, as built by to_query_string

    Returns:
        lowercase hex MD5 digest of secret + query
    """
    return hashlib.md5((secret + query).encode("utf-8")).hexdigest()
