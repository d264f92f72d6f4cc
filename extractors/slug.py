def derive_slug(url: str) -> str:
    """
    Short identifying token for a URL: the last non-empty path segment,
    or the first label of the host when the URL has no usable path.
    Never raises.
    """
    cleaned = url
    if "://" in cleaned:
        cleaned = cleaned.split("://", 1)[1]

    for marker in ("?", "#"):
        cleaned = cleaned.split(marker, 1)[0]

    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]

    # parts[0] is the host
    parts = cleaned.split("/")
    if len(parts) > 1 and parts[-1]:
        return parts[-1]

    for segment in reversed(parts[1:]):
        if segment:
            return segment

    # Naive: "www.example.com" gives "www", an empty URL gives ""
    return cleaned.split(".")[0]
