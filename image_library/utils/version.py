import pathlib
from functools import lru_cache


@lru_cache()
def version() -> str:
    current_file = pathlib.Path(__file__)
    version_file = current_file.parent.parent / "VERSION"
    with open(version_file) as file:
        return file.readline().strip()
