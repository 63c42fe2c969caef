# cub3d

Small helpers for the tools of a raycasting first-person game: character
classes, number conversion, text and byte-string operations, a linked list,
a minimal printf and a buffered line reader. They live in the
`cub3d.libft` sub-package and need nothing beyond the standard library.

## Install

    pip install .

## Modules

`cub3d.libft.chars` classifies ASCII characters and changes their case. Each
function takes a one-character string or an integer code:
`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_space`,
`to_lower`, `to_upper`. The case converters give back the kind of value they
were given.

    from cub3d.libft.chars import is_space, to_upper
    is_space("\t")     # True
    to_upper("a")      # "A"
    to_upper(97)       # 65

`cub3d.libft.convert` has `atoi(text)`, which reads a leading decimal integer
after whitespace and one sign (no digits gives 0, and the result wraps to a
32-bit signed value), and `itoa(n)`, which gives the decimal text of `n`.

    atoi("  -42abc")   # -42
    itoa(-7)           # "-7"

`cub3d.libft.output` writes to a text stream, standard output by default:
`put_char(c, stream)`, `put_str(s, stream)`, `put_endl(s, stream)` (adds a
newline) and `put_nbr(n, stream)`.

`cub3d.libft.cstrings` works on zero-terminated strings in byte buffers:
`strlen`, `strdup`, `strcpy`, `strlcpy` and `strlcat`. A write that would not
fit in the destination raises `ValueError`.

    from cub3d.libft.cstrings import strlcpy
    buf = bytearray(8)
    strlcpy(buf, b"hello", 4)   # 5; buf now starts with b"hel\0"

`cub3d.libft.strings` works on `str` values and returns indices, with `None`
for "not found": `split` (drops empty pieces), `strtrim`, `substr`,
`strjoin`, `strnstr`, `strchr`, `strrchr`, `strncmp`, `strcmp` (both return
the difference of the first differing character codes), `strmapi` and
`striteri` (which changes a mutable sequence of characters in place).

    from cub3d.libft.strings import split, strnstr
    split("a,,b", ",")           # ["a", "b"]
    strnstr("abcdef", "cd", 5)   # 2

`cub3d.libft.linked` provides `Node`, `LinkedList` and `delete_node`.
A `LinkedList` can be built from an iterable and supports `push_front`,
`push_back`, `last`, `len()`, iteration over its contents, `clear(delete)`,
`for_each(func)` and `map(func, delete)`, which returns a new list.

    from cub3d.libft.linked import LinkedList
    items = LinkedList([1, 2, 3])
    list(items.map(lambda x: x * 2))   # [2, 4, 6]

`cub3d.libft.printf` formats `%c %s %p %d %i %u %x %X %%`.
`format_printf(fmt, *args)` returns the text; `printf(fmt, *args)` writes it
to standard output and returns its length. Too few arguments raise
`TypeError`.

    from cub3d.libft.printf import format_printf
    format_printf("%d %x %s", 255, 255, None)   # "255 ff (null)"

`cub3d.libft.gnl` reads a text stream a few characters at a time (7 by
default) and splits it into lines, each with its newline except perhaps the
last. Use `LineReader(stream).next_line()`, iterate over the reader, or call
`get_next_line(reader)`; the end of the stream gives `None`.

    import io
    from cub3d.libft.gnl import LineReader
    list(LineReader(io.StringIO("a\nb")))   # ["a\n", "b"]

## What this package does not do

It does not read or check `.cub` scene files: there is no scene loader, no
texture or colour validation, no map check and no `cub3d` command. Only the
helper modules above are included.

## Tests

    pip install .[test]
    pytest