def split_path(path: str) -> list[str]:
    converted = path.replace("\\", "/")
    if not converted.strip():
        return []
    return [part for part in converted.split("/") if part]


def normalize_path(path: str) -> str:
    # "." and ".." are kept as literal segments; only separators are rewritten
    return "/" + "/".join(split_path(path))


def normalize_dir_path(path: str) -> str:
    normalized = normalize_path(path)
    if normalized == "/":
        return normalized
    return normalized + "/"
