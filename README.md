# wordhash

This package has two parts. The first is a pair of fixed-size hash tables for string keys. The second is a small toolkit for working with words.

## Hash tables

`wordhash.hash_set.HashSet` and `wordhash.hash_map.HashMap` both build on `wordhash.hashtable.HashTable`. When two keys collide, the table handles it in one of the ways given by `CollisionType`:

- `CollisionType.CHAIN` keeps a list of keys in each slot.
- `CollisionType.LINEAR` uses linear probing.
- `CollisionType.DOUBLE` uses double hashing.

A table is built from a list of integer parameters:

- `params[0]` is the base of the primary polynomial hash.
- `params[-1]` is the table size.
- For double hashing, `params[1]` is the base of the step hash and `params[2]` is its modulus. The step is `params[2] - polynomial_hash(key, params[1], params[2])`.

An empty parameter list raises `ValueError`, and so does a table size that is not positive.

```python
from wordhash.hashtable import CollisionType
from wordhash.hash_set import HashSet
from wordhash.hash_map import HashMap

words = HashSet(CollisionType.LINEAR, [31, 7])
words.insert("apple")
"apple" in words          # True
len(words)                # 1
words.get_slot("apple")   # home slot of the key
print(words)              # slots joined by " | ", empty ones shown as <EMPTY>

phone = HashMap(CollisionType.DOUBLE, [31, 5, 7, 11])
phone.insert("alice", "one")
phone.get("alice")        # "one"
phone.get("bob")          # None
phone.load_factor()       # items / table size
```

How the tables behave:

- When a key is already present, inserting it again does nothing. A `HashMap` keeps the first value it was given for a key.
- With linear probing or double hashing, inserting a new key into a full table raises `RuntimeError`. Chained tables never fill up; their chains just get longer.
- When you print a map, each entry appears as `(key , value)`. Entries chained in the same slot are joined by ` ; `.
- Tables never resize, and there is no way to remove a key.

The hash is built from `letter_number`, which maps `a`–`z` to 0–25 and `A`–`Z` to 26–51. `polynomial_hash(key, z, p)` computes the rolling hash. Both live in `wordhash.hashtable`. Keys are expected to consist of Latin letters.

`wordhash.primes.PrimeGenerator(primes)` gives out sizes from the list you supply. `next_size()` removes and returns the last remaining size. When the list is used up it raises `IndexError`. It is not connected to the tables: use it to pick a size for the parameter list yourself.

## Word toolkit

- `wordhash.trie.Trie` stores words. `insert(word)` adds a word. `suggestions(prefix)` returns every stored word that starts with `prefix`, in alphabetical order.
- `wordhash.autocorrect.edit_distance(a, b)` returns the Levenshtein distance between two strings.
- `wordhash.autocorrect.autocorrect_text(text, dictionary)` splits `text` on whitespace and replaces each word with the nearest dictionary word.
  - It only considers dictionary words whose length differs by at most two.
  - On a tie, the word that comes first in the dictionary wins.
  - A word with no candidate is kept as it is.
- `wordhash.kmp.build_lps(pattern)` builds the Knuth–Morris–Pratt prefix table. `wordhash.kmp.kmp_search(text, pattern)` reports whether `pattern` occurs in `text`. An empty pattern never matches.
- `wordhash.plagiarism.detect_plagiarism(text, banned_file)` returns the non-empty lines of `banned_file` that occur in `text`. It raises `OSError` if the file cannot be opened.

## Command line

```
wordhash [--dictionary PATH] [--banned PATH]
```

The command reads a word list from `--dictionary` (default `dictionary.txt`). It lower-cases every word and loads the list into a trie. If the file cannot be opened, it exits with status 1.

It then works through these steps:

1. It reads a prefix from standard input and prints the matching words.
2. It reads sentence lines until a line holding only `$` appears, or until input ends.
3. It lower-cases the text and prints the autocorrected words.
4. It prints each phrase from `--banned` (default `banned.txt`) that occurs in the text.

If the banned-phrases file cannot be opened, the command prints an error and treats the file as having no phrases.