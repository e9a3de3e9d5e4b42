

def normalize_keyword(keyword: str) -> str:
    """
    Normalize a search keyword for use in the upstream URL

    Args:
        keyword: Raw keyword from the query string

    Returns:
        str: Trimmed, lowercased keyword
    """
    if not keyword:
        return ""
    return keyword.strip().lower()


def build_search_url(base_url: str, keyword: str) -> str:
    """
    Build the upstream search URL for a keyword

    Args:
        base_url: Base path of the postcode search page
        keyword: Raw keyword, normalized before appending

    Returns:
        str: Target URL
    """
    return f"{base_url}{normalize_keyword(keyword)}"
