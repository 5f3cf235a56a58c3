# ftkit

Small helpers with the behaviour of the classic C character, string and
memory routines, a minimal `printf`, and a line reader that reads a stream
in fixed-size chunks. Nothing outside the standard library is needed.

## Install

    pip install ftkit

## Modules

### `ftkit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint` return `True` or
`False` for an ASCII code, given as an `int` or a one-character `str`.
`toupper` and `tolower` change only ASCII letters and return the same kind
of value they were given (`toupper("a") == "A"`, `toupper(97) == 65`).

### `ftkit.memory`

Works on `bytearray`, `bytes` and `memoryview` objects:

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c`;
  `bzero(buf, n)` fills them with zero.
- `memcpy(dest, src, n)` and `memmove(dest, src, n)` copy `n` bytes into
  the start of `dest` and return it. `memcpy(None, None, n)` returns `None`.
- `memchr(buf, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray`.

A negative count, or one longer than a buffer, raises `ValueError`.

### `ftkit.conversions`

- `atoi(s)` skips leading whitespace and one optional sign, then reads
  digits up to the first non-digit. Values beyond the 32-bit range saturate
  at `INT_MAX` or `INT_MIN`.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` for anything outside that range.

### `ftkit.strings`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
`strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.

Searches return an index or `None` rather than a pointer; searching for
`"\0"` with `strchr` or `strrchr` gives `len(s)`. `strlcpy(src, size)` and
`strlcat(dest, src, size)` return a pair: the text that fits in a buffer of
`size` characters (terminator included) and the length the full result
would have had. `striteri(chars, f)` works in place on a mutable sequence
of characters; a non-`None` return value from `f` replaces the item.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to any text
stream. `None` passed to `putstr_fd` or `putendl_fd` writes nothing.

### `ftkit.printf`

`sprintf(fmt, *args)` returns formatted text; `printf(fmt, *args,
stream=None)` writes it (to standard output by default) and returns the
number of characters written. The conversions are:

| Spec     | Output                                                      |
|----------|-------------------------------------------------------------|
| `%c`     | a character (from a one-character `str` or an `int`)        |
| `%s`     | a string; `None` prints `(null)`                            |
| `%p`     | `0x` and lower-case hex; `None` or 0 prints `(nil)`         |
| `%d` `%i`| a signed 32-bit integer                                     |
| `%u`     | an unsigned 32-bit integer                                  |
| `%x` `%X`| unsigned 32-bit hex, lower or upper case                    |
| `%%`     | a percent sign                                              |

An unknown conversion or a missing argument raises `FormatError` (a
`ValueError`); an argument of the wrong type raises `TypeError`. A lone `%`
at the end of the format is written as it stands. Flags, field widths and
precision are not supported.

### `ftkit.linereader`

`LineReader(stream, buffer_size=1024)` returns one line at a time, newline
included, from a text or binary stream. `next_line()` returns `None` once
the stream is exhausted; iterating the reader stops at the same point. The
last line is returned even without a trailing newline. The helpers
`merge`, `trim_after` and `trim_before` join pending text and split it at a
separator index.

## Examples

    from ftkit.printf import sprintf
    from ftkit.strings import split

    sprintf("%d items, %x hex, %s", 42, 255, None)
    # '42 items, ff hex, (null)'

    split("12301234501201", "0")
    # ['123', '12345', '12', '1']

    from ftkit.linereader import LineReader

    with open("notes.txt") as fh:
        for line in LineReader(fh):
            print(line, end="")

## Command

Print a file, or standard input when no file is given, line by line:

    ftkit-lines notes.txt
    ftkit-lines < notes.txt

The file is read as UTF-8. The command exits with status 1 when the file
cannot be opened or more than one argument is given.