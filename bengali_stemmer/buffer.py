class WordBuffer:
    """Shrinking word buffer with tail-oriented navigation methods"""

    def __init__(self, text: str):
        self.text = text
        self.protected = set()

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"WordBuffer({self.text!r})"

    def peek_back(self, offset: int = 0) -> str | None:
        """Look at character offset positions before the last one"""
        pos = len(self.text) - 1 - offset
        return self.text[pos] if 0 <= pos < len(self.text) else None

    def ends_with(self, suffix: str) -> bool:
        """Check if buffer ends with suffix"""
        return bool(suffix) and self.text.endswith(suffix)

    def ends_with_any(self, candidates) -> str | None:
        """Return the first candidate the buffer ends with"""
        for suffix in candidates:
            if self.ends_with(suffix):
                return suffix
        return None

    def before(self, suffix: str) -> str:
        """Text that would remain once suffix is removed from the tail"""
        if not self.ends_with(suffix):
            return self.text
        return self.text[: len(self.text) - len(suffix)]

    def char_before(self, suffix: str) -> str | None:
        """Character immediately preceding suffix"""
        if not self.ends_with(suffix):
            return None
        return self.peek_back(len(suffix))

    def truncate(self, count: int = 1) -> str:
        """Remove and return count trailing characters"""
        count = max(0, min(count, len(self.text)))
        if not count:
            return ""
        removed = self.text[-count:]
        self.text = self.text[:-count]
        return removed

    def is_empty(self) -> bool:
        """Check if nothing is left"""
        return not self.text

    def protect(self, name: str) -> None:
        """Mark the current tail as root material a later rule must keep"""
        self.protected.add(name)

    def is_protected(self, name: str) -> bool:
        return name in self.protected
