# desafiocrack

This tool recovers a text that went through two steps. First it was compressed
with RLE or LZ78. Then each byte was encrypted: rotated left by some number of
bits, then XORed with a one-byte key.

You give it the encrypted file and a short fragment of the original text, called
the hint. It tries every rotation from 1 to 7 with every key from 0 to 255, in
that order. For each pair it decrypts the data and decompresses it, first as RLE
and then as LZ78. It stops at the first result that contains the hint.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
desafiocrack [TAG] [-C DIRECTORY] [--rotation N --key K]
```

`TAG` is a single character that names the challenge. If you leave it out, the
first character on standard input that is not whitespace is used:

```
echo 4 | desafiocrack
```

For tag `4` the command reads two files from `DIRECTORY`, which is the current
directory by default:

- `Encriptado4.txt` holds the encrypted bytes.
- `pista4.txt` holds the hint. Only its first line is used, up to 999 bytes.

### Search mode (default)

The command runs the full search. If it finds a match, it prints:

- the rotation and the XOR key, in hex and in decimal
- the compression method
- the position of the hint, counting from 1
- the length of the recovered text
- the hint with up to 20 bytes of context on each side
- the whole recovered text

It also writes the recovered text to `DIRECTORY`, as `resultado_rle.txt` or
`resultado_lz78.txt` depending on which method matched.

If no combination matches, it prints a list of possible causes.

The command exits with status 1 if either input file cannot be opened.
Otherwise it exits with 0, including when no match is found.

### Report mode

```
desafiocrack 3 --rotation 3 --key 0x40
```

Give both `--rotation` and `--key` when you already know the parameters. The
key accepts decimal, `0x` hex or `0o` octal, and must be between 0 and 255. In
this mode the command does not search and reads no hint file. It decrypts
`EncriptadoTAG.txt` and prints a report of the decrypted bytes:

- the bytes as a C `unsigned char` array in hex
- the bytes as a C `char` array, with printable characters quoted
- a preview of the first 300 bytes, with non-printable bytes shown as `[hex]`
- counts of lower-case letters, upper-case letters, digits and other bytes

The command exits with status 1 if the file is missing or empty.

## Library

### `desafiocrack.bits`

- `rotate_right(byte, n)` rotates an 8-bit value `n` bits to the right, taking
  `n` modulo 8.
- `decrypt(data, rotation, key)` XORs each byte with `key`, then rotates it
  right by `rotation`. It returns `bytes`.

Both functions raise `ValueError` for a byte or key outside 0..255.

### `desafiocrack.rle`

`decompress_rle(data, max_run=1000, limit=99999)` expands 3-byte records. Each
record is a big-endian 16-bit run length followed by the byte to repeat.

- Records with a run length of 0 are skipped.
- Records with a run length above `max_run` are skipped.
- The output is cut at `limit` bytes.
- A trailing partial record is ignored.
- Passing `None` for `max_run` or `limit` turns that bound off.

### `desafiocrack.lz78`

`decompress_lz78(data, limit=99999)` expands 3-byte records. Each record is a
big-endian 16-bit dictionary index followed by the next byte. Index 0 is the
empty prefix.

- A zero byte in the character position ends decoding.
- A trailing partial record ends decoding.
- Records that point to an index not yet in the dictionary are ignored.
- The dictionary holds at most 65536 entries.
- The output is cut at `limit` bytes.

### `desafiocrack.solver`

- `Method` is an enum with the members `RLE` and `LZ78`. Each member has a
  `label`, a lower-case `suffix` and a `decompress(data)` method.
- `try_combination(data, hint, rotation, key, methods=(Method.RLE, Method.LZ78))`
  tests one rotation and key pair.
- `solve(data, hint, methods=...)` runs the whole search.

Both functions return a `Solution` or `None`. `try_combination` also returns
`None` when `data` or `hint` is empty, or when `rotation` is outside 1..7. The
hint may be `bytes` or `str`; a `str` is encoded as UTF-8.

`Solution` is a frozen dataclass with these fields: `rotation`, `key`,
`method`, `position`, `text` and `hint`. `Solution.context(margin=20)` returns
the hint with up to `margin` bytes on each side.

### `desafiocrack.report`

- `hex_array(data)` formats the bytes as a C `unsigned char` array literal.
- `char_array(data)` formats the bytes as a C `char` array literal.
- `preview(data, limit=300)` returns the first `limit` bytes as text.
- `char_stats(data)` returns a `CharStats` with the fields `lowercase`,
  `uppercase`, `digits` and `other`, and a `total` property.
- `render_report(data, rotation, key)` decrypts `data` and builds the report
  that report mode prints.

## What it does not do

The package only undoes the transformation. It does not compress or encrypt.
Its search covers only rotations 1..7 and single-byte keys 0..255. It
recognises only the two 3-byte record formats described above.