# loosejson

Work with JSON documents whose shape you don't know in advance. You can step
through nested objects and arrays. Values can be read with type checks or with
fallbacks, and the document can be edited in place. Everything lives in the
`loosejson.document` module.

## Installation

```
pip install loosejson
```

## Reading a document

```python
from loosejson.document import loads

doc = loads(b'''{
    "test": {
        "array": [1, "2", 3],
        "arraywithsubs": [{"subkeyone": 1}, {"subkeytwo": 2}],
        "int": 10,
        "float": 5.150,
        "string": "simplejson",
        "bool": true
    }
}''')

doc.get("test").get("int").as_int()                                 # 10
doc.get("test").get("float").as_float()                             # 5.15
doc.get_path("test", "string").as_str()                             # "simplejson"
doc.get("test").get("arraywithsubs").get_index(0).get("subkeyone").as_int()  # 1
```

`loads` accepts `str`, `bytes` or `bytearray`. It decodes only the first JSON
value in the input and ignores anything that follows it. `NaN` and `Infinity`
literals are rejected.

Numbers are not converted to Python numbers. Each one is kept as a
`JsonNumber` that holds the literal text, so large integers come through
exactly. The integer accessors `as_int`, `as_int64` and `as_uint64` check that
the value fits in the signed or unsigned 64-bit range. If it does not, they
raise `ValueError`.

There are other ways to build a document:

- `from_reader(stream)` reads a file-like object and decodes what it returns.
- `from_object(value)` wraps an existing Python value.
- `new()` gives a document holding an empty object.

The wrapped value is available as the `data` property. `version()` returns the
version string.

## Typed access

These methods raise `JsonTypeError` when the value has a different type:

- `as_map`
- `as_array`
- `as_bool`
- `as_str`
- `as_bytes`, which returns the string encoded as UTF-8
- `as_string_list`, in which nulls become empty strings
- `as_float`
- `as_int`
- `as_int64`
- `as_uint64`

`JsonTypeError` is a subclass of `TypeError`.

The `must_*` methods do not raise a type or conversion error. When the value
cannot be read, they return the default you pass:

- `must_array`
- `must_map`
- `must_str`
- `must_string_list`
- `must_int`
- `must_int64`
- `must_uint64`
- `must_float`
- `must_bool`

The defaults when you pass nothing are `None` for containers, `""`, `0`, `0.0`
and `False`.

```python
doc.get("test").get("missing_int").must_int(5150)      # 5150
doc.get("test").get("missing").must_str("fallback")    # "fallback"
```

## Missing values

A missing key or an out-of-range index gives back an empty `Json` (one holding
`None`), so lookups can be chained. A negative index raises `IndexError`.

To tell "missing" apart from "null", use `check_get(key)`. It returns `None`
when the data is not an object or has no such key.

## Editing

```python
doc.set("name", "value")            # no effect unless the data is an object
doc.delete("name")
doc.set_path(["a", "b", "c"], 42)   # creates or replaces intermediate objects
doc.set_path([], {"fresh": True})   # an empty path replaces the whole document
doc.unmarshal_json(b'{"x": 1}')     # replace the content with newly parsed JSON
```

## Encoding

`encode()` returns compact JSON as UTF-8 bytes, and `encode_pretty()` indents
it by two spaces.

- Object keys are sorted.
- `<`, `>`, `&`, U+2028 and U+2029 in strings are written as `\u` escapes.
- `bytes` values are written as base64 strings.
- Non-finite floats cannot be encoded.

## What it does not do

This is a library only. It has no command-line tool, and it offers no schema
validation or query language beyond key and index lookups.