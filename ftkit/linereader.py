"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import sys
from typing import AnyStr, Generic, Iterator, Optional, Protocol, Sequence

from ftkit.output import putstr_fd

__all__ = ["LineReader", "merge", "trim_after", "trim_before", "main", "BUFFER_SIZE"]

BUFFER_SIZE = 1024


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ..., /) -> AnyStr: ...


def merge(save: Optional[AnyStr], buffer: AnyStr) -> AnyStr:
    """Concatenate the pending text *save* (None counts as empty) with *buffer*."""
    if save is None:
        return buffer
    return save + buffer


def trim_after(s: AnyStr, sep: int) -> AnyStr:
    """The part of *s* up to and including the separator at index *sep*."""
    if not 0 <= sep < len(s):
        raise IndexError(f"separator index {sep} out of range for length {len(s)}")
    return s[: sep + 1]


def trim_before(s: AnyStr, sep: int) -> AnyStr:
    """The part of *s* after the separator at index *sep*; empty when nothing follows."""
    if not 0 <= sep < len(s):
        raise IndexError(f"separator index {sep} out of range for length {len(s)}")
    return s[sep + 1 :]


class LineReader(Generic[AnyStr]):
    """Return successive lines of *stream*, each with its newline kept.

    The stream is read in chunks of *buffer_size*; text read past the end of
    a line is held until the next call. Works with text and binary streams.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._save: Optional[AnyStr] = None

    @staticmethod
    def _newline_index(data: AnyStr) -> int:
        newline = "\n" if isinstance(data, str) else b"\n"
        return data.find(newline)  # type: ignore[arg-type]

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        while self._save is None or self._newline_index(self._save) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._save = None
                raise
            if not chunk:
                last, self._save = self._save, None
                return last if last else None
            self._save = merge(self._save, chunk)

        save = self._save
        index = self._newline_index(save)
        line = trim_after(save, index)
        self._save = trim_before(save, index)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


def _copy_lines(stream: _Readable[str]) -> None:
    for line in LineReader(stream):
        putstr_fd(line, sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a file, or standard input when no path is given, line by line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        putstr_fd("Error: Invalid number of arguments\n", sys.stderr)
        return 1
    if not args:
        _copy_lines(sys.stdin)
        return 0
    try:
        handle = open(args[0], encoding="utf-8", newline="")
    except OSError as exc:
        putstr_fd(f"open: {exc.strerror or exc}\n", sys.stderr)
        return 1
    with handle:
        _copy_lines(handle)
    return 0


if __name__ == "__main__":
    sys.exit(main())