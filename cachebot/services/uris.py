"""
Expansion of path fragments into the absolute URLs to purge.
"""


class UriNormalizer:
    """Expands a path fragment against configured URL bases and suffix variants."""

    def __init__(self, bases: list[str], suffixes: list[str] | None = None):
        self._bases = list(bases)
        self._suffixes = list(suffixes or [])

    @property
    def bases(self) -> list[str]:
        return list(self._bases)

    @property
    def suffixes(self) -> list[str]:
        return list(self._suffixes)

    def expand(self, fragment: str) -> list[str]:
        """
        Build every URL a fragment maps to.

        Output is base-major: for each base the bare URL comes first,
        followed by one URL per suffix in configuration order.

        Args:
            fragment: Path starting with "/" (a fully-qualified URL under
                one of the bases is accepted too)

        Returns:
            len(bases) * (1 + len(suffixes)) URLs
        """
        for base in self._bases:
            if fragment.startswith(base):
                fragment = fragment[len(base):]

        urls: list[str] = []
        for base in self._bases:
            urls.append(base + fragment)
            for suffix in self._suffixes:
                if fragment.endswith("/"):
                    urls.append(base + fragment + suffix)
                else:
                    urls.append(f"{base}{fragment}/{suffix}")
        return urls
