# ftformat

A minimal printf-style formatter. It understands a small, fixed set of
conversions. It can return the formatted text, or it can write the text
and return the number of characters written.

## Supported conversions

| Spec       | Argument                 | Output                                                        |
|------------|--------------------------|---------------------------------------------------------------|
| `%c`       | one-character string or integer | the character; an integer is truncated to one byte     |
| `%s`       | string or `None`         | the string; `None` prints `(null)`                            |
| `%p`       | integer address or `None`| `0x` followed by lowercase hex; zero or `None` prints `(nil)` |
| `%d`, `%i` | integer                  | signed decimal, wrapped to 32 bits                            |
| `%u`       | integer                  | unsigned decimal, wrapped to 32 bits                          |
| `%x`, `%X` | integer                  | unsigned hex, wrapped to 32 bits, lower or upper case         |
| `%%`       | none                     | a literal `%`                                                 |

Addresses for `%p` wrap to 64 bits.

Rules for the format string:

- Any other character after `%` produces no output and takes no argument.
- A lone `%` at the very end of the format string ends the output.
- Surplus arguments are ignored. Too few arguments raise `TypeError`.
- A format of `None` raises `ValueError`. A format that is not a string
  raises `TypeError`.
- Width, precision and flags are not supported.

## Usage

```python
from ftformat.printf import render, printf

render("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

render("%u", -1)
# '4294967295'

count = printf("%c%c\n", "o", "k")   # writes "ok\n" to stdout, returns 3
```

`printf` writes to standard output by default. Pass `file=` to write to
any other text stream. It returns the number of characters written.

The individual converters are in `ftformat.conversions`: `format_char`,
`format_str`, `format_int`, `format_unsigned`, `format_hex` and
`format_pointer`.

```python
from ftformat.conversions import format_hex, format_pointer

format_hex(-1, uppercase=True)   # 'FFFFFFFF'
format_pointer(0)                # '(nil)'
format_pointer(0xdeadbeef)       # '0xdeadbeef'
```

## Installing

```
pip install .
pip install ".[test]"   # to run the tests with pytest
```