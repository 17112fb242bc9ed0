# examplekit

A collection of small, focused examples. Each module does one job and can be
used on its own: searching and number theory, edit distances, ISBN checks,
colour conversion, tournament scheduling, word search, CSV, JSON and XML
handling, templated LaTeX letters, AES-GCM encryption, hashing, archives,
SQLite storage, fractal and circle images, approximations of π, small HTTP
and TCP services, and a ticket booking app.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from examplekit.search import binary_search, lower_bound, upper_bound
from examplekit.numbers import gcd, nth_prime
from examplekit.stringdistance import levenshtein_distance
from examplekit.isbn import verify_isbn

arr = [1, 4, 5, 7, 9, 10, 35, 56, 79, 80, 100, 200, 210, 250]
binary_search(9, arr)                            # True

bounds = [1, 1, 2, 2, 2, 3, 3, 4, 4, 4, 6, 6, 7, 7, 7]
lower_bound(bounds, 4), upper_bound(bounds, 4)   # (7, 10)

gcd(15, 230)                                     # 5
nth_prime(15)                                    # 47
levenshtein_distance("foobar", "fubar")          # 2
verify_isbn("0306406152")                        # True
```

The modules:

- `examplekit.search`: `binary_search`, `lower_bound`, `upper_bound` and
  `in_array(needle, haystack)`, which returns `(found, index)` and matches
  type as well as value.
- `examplekit.numbers`: `absolute`, `isqrt`, `nth_prime`, `gcd`, `lcm`,
  `ackermann`, `factorial`, the endless generator `fibonacci()`,
  `fibonacci_numbers(n)`, `ordinal(value)` (`"1st"`, `"12th"`) and `total(*args)`.
- `examplekit.stringdistance`: `levenshtein_distance` and
  `damerau_levenshtein_distance`, computed over UTF-8 bytes.
- `examplekit.isbn`: `verify_isbn`, `verify_isbn10`, `verify_isbn13`.
- `examplekit.color`: `rgb_to_hsl(r, g, b)` gives hue in degrees and
  saturation and lightness in percent, truncated to integers.
- `examplekit.schedule`: `round_robin(weeks, teams)` pairs teams per week by
  the circle method, adding a bye team when the count is odd.
- `examplekit.wordsearch`: `WordSearch(board)` with `exist(word)` and
  `find_words(words)`; `remove_duplicates(elements)`.
- `examplekit.stack`: `Stack` with `push` and `pop`; popping an empty stack
  returns `""`.
- `examplekit.parallel`: `prime_requests(requests, parallel)` computes
  `(n, nth_prime(n))` pairs, optionally in worker processes.
- `examplekit.geometry`: `Rectangle`, `Square`, `Circle` and `Cuboid` with
  `area()`, `extent()` and `volume()`, and `missing_side(a, b, c)` for the side
  of a right triangle given as `"?"`.
- `examplekit.csvtools`: `load_csv`, `load_csv_from_string`,
  `load_csv_from_file` and `get_head` for `;`-separated tables,
  `fixed_length_before`, `csv_to_markdown(path)` and `write_csv(path, rows)`.
- `examplekit.jsonwalk`: `json_foreach(node, handler)` calls
  `handler(key, index, value, depth)` for every nested value; `JsonCodec`
  encodes compact, key-sorted JSON to a stream and decodes from one.
- `examplekit.xmldata`: `parse_document_xml(text)` returns a `Variables`
  holding a `Head` (name and IP) and a dict of the elements under `Data`.
- `examplekit.checklist`: `print_check_list(writer, items)` writes one item
  per line.
- `examplekit.apiclient`: a `Server` that delegates to any `ApiClient`;
  `MyApiClient` doubles locally, and tests may pass their own client.
- `examplekit.letters`: `load_people(text)` reads a JSON array into `Person`
  records; `render_letters(people, date, place)` returns LaTeX source, one
  letter per person; `short_middle_name` abbreviates a middle name.
- `examplekit.cipher`: `aes_gcm_encrypt`/`aes_gcm_decrypt`,
  `encrypt`/`decrypt` (nonce prepended), `encode_value`/`decode_value`
  (encrypted, gzipped, base64) and `EncryptedStore`, an SQLite table whose
  values are stored encrypted. Tampered data raises `ValueError`.
- `examplekit.hashing`: `digests(text, secret)` returns MD5, SHA-256,
  SHA-512 and SHA-512/256 in hex and an HMAC-SHA512 in base64.
- `examplekit.archives`: `zip_content`, `unzip_all` (refuses entries that
  would land outside the destination), `read_zipped`, raw-deflate
  `compress_file`/`decompress_file` and `gzip_stream(source, target, level)`.
- `examplekit.notes`: `NoteStore`, an SQLite table of timestamped notes.
- `examplekit.fractals`: `render_escape` and `mandelbrot(...)` return Pillow
  images of the Mandelbrot set; `escape_gray`, `mandel` and `pixel_color`
  give single values.
- `examplekit.images`: `rgb_circles` draws three overlapping colour circles;
  `grayscale` and `invert` filter an image.
- `examplekit.pi`: the generators `leibniz()`, `euler()` and
  `prime_product()`, and `approximate(method, stop)`.
- `examplekit.textutils`: `to_string(value)`, `iso8601_matches(text)` and
  `sum_numbers(text)`.
- `examplekit.webapps`: `request_message`, `visit_message` and
  `make_server(host, port)`.
- `examplekit.tcp`: `tcp_client(request, address, retries)` and
  `serve_messages(port, sink)`, which collects what clients send and passes
  it to `sink` as `"Data N: text"`.
- `examplekit.booking`: `BookingApp` with `validate`, `book` and
  `first_names`, and `validate_user_input`.

## Command-line tools

```
examplekit-isbn 978-0-306-40615-7     # verify an ISBN-10 or ISBN-13
examplekit-primes true                # default prime requests, in parallel
examplekit-primes false 10 100        # the 10th and 100th prime, in order
examplekit-double                     # double 2 through the API client
examplekit-notes insert "some text"   # store a note (--database, default sqlite.sqlite)
examplekit-notes select               # show the latest note
examplekit-notes csv                  # dump all notes as CSV
examplekit-pi leibniz                 # refine until Ctrl-C; also euler, prime; --live
examplekit-httpd --port 8080          # start the HTTP server
examplekit-booking                    # book tickets from standard input
```

`examplekit-pi` with no or an unknown method prints π at once. The HTTP
server answers `/about`, `/home`, `/visit` (greets with the time of the last
visit, kept in a `timestamp` cookie) and `/stop` (shuts the server down);
every other path gets a "Hello World" reply with a running request number.

## What the package does not do

- The HTTP server serves no files and accepts no uploads; it only answers
  the routes above with plain text.
- The TCP message server has no command of its own; start it from Python
  with `serve_messages`.
- `render_letters` produces LaTeX source only; compiling it is left to a
  LaTeX installation.