# aitch

Build HTML as a tree of Python objects once, then render it as often as you
like against different data.

Elements, attributes, text, comments and fragments are plain objects. Any part
of the output can depend on data supplied at render time, through dynamic value
keys, callables, conditionals and collectors.

## Installing

```
pip install aitch
```

To run the test suite, install the `test` extra and run `pytest`.

## Building and rendering

```python
import io

from aitch.attributes import attribute, delimited_attribute
from aitch.context import Context
from aitch.element import element
from aitch.nodes import DynamicValueKey

greeting = element(
    "p",
    "Hello, ", DynamicValueKey("name"),
    delimited_attribute("class", " ", "greeting"),
    delimited_attribute("class", " ", DynamicValueKey("greeting-class")),
    attribute("id", "hello"),
)

out = io.StringIO()
greeting.render(Context(writer=out, data={"name": "Aitch!", "greeting-class": "admin"}))
# <p class="greeting admin" id="hello">Hello, Aitch!</p>
```

You can pass the arguments to `element` in any order. Attributes go into the
opening tag. Everything else becomes content, and any argument that is not a
node is wrapped as text.

### Values

Wherever a node takes values, the following are accepted:

* `None` is dropped.
* Strings are written as given. `bytes` are decoded as UTF-8.
* Booleans are written as `true` or `false`. Other objects are written with `str()`.
* `DynamicValueKey("key")` is looked up in `Context.data` at render time.
* A callable is called at render time, with the context if it takes an
  argument and with nothing if it does not. Its result is written.
* `concat_value(*parts)` (a `ConcatValue`) joins several parts into one value.

All of these live in `aitch.nodes`.

### Attributes (`aitch.attributes`)

* `attribute(name, *values)` renders ` name="..."`. On an element, a later
  attribute with the same name replaces an earlier one.
* `boolean_attribute(name)` renders the bare name, for example ` selected`.
* `delimited_attribute(name, delimiter, *values)` joins its values with the
  delimiter. Repeated delimited attributes on one element merge into a single
  attribute, as in `class="a b c"`.

Names must match `[a-zA-Z][a-zA-Z0-9._\-:]*`, and `is_valid_name(name)` checks
this. By default the factories return `None` for an invalid name. If you set
`aitch.nodes.raise_on_invalid_name = True`, they raise `ValueError` instead.
The same rule applies to `element` and `void_element`.

### Elements (`aitch.element`)

`element(name, ...)` gives a `VoidElement` for the HTML void tags (`area`,
`base`, `br`, `col`, `embed`, `hr`, `img`, `input`, `link`, `meta`, `param`,
`source`, `track`, `wbr`) and an `Element` for any other name.
`void_element(name, ...)` always gives a void element. A void element has no
closing tag and ignores any content that is not an attribute.

### Other nodes

* `text(...)` (`aitch.nodes`) writes its values and escapes `&`, `<` and `>`.
* `comment(...)` writes `<!--...-->`.
* `fragment(...)` writes its values exactly as given, with no escaping or
  checking. Use it with care.
* `collection(*nodes)` (`aitch.collection`) groups nodes. Attributes inside a
  collection are given to the enclosing element.
* `content_collect(fn)` calls `fn(ctx)` at render time to get the nodes to
  render. Any attributes it returns are ignored.

### Conditionals (`aitch.conditional`)

```python
from aitch.conditional import conditional, when
from aitch.nodes import text

page = element(
    "p",
    delimited_attribute("class", " ", "base"),
    when("isAdmin", delimited_attribute("class", " ", "admin")),
    conditional(lambda ctx: ctx.data.get("beta", False), text(" (beta)")),
)
```

`conditional(fn, *nodes)` renders its nodes only when `fn(ctx)` is true.
Without a function it is a plain collection.

`when(key, *nodes)` makes its condition the presence of `key` in the context
data. If the value is a boolean, that boolean is the result. A key starting
with `!` reverses the test.

Attributes inside a conditional, including nested conditionals, are applied to
the enclosing element only when every enclosing condition holds. They merge
with, or replace, the element's other attributes in the same way as above.

## Context (`aitch.context`)

`Context(writer, data, cargo)` carries the output stream, the data mapping and
an optional cargo object. `write()` accepts text or bytes. The first `OSError`
or `ValueError` from the writer is stored in `ctx.error`, and after that later
writes are skipped. If an error was recorded, `render()` raises `RenderError`.

`get(ctx, key, kind=object, default=None)` looks `key` up first in the data and
then in the cargo, which may be a mapping or an object with an attribute of
that name. The value is returned only if it is an instance of `kind`.
Otherwise you get `default`. `must_get(ctx, key, kind)` raises `KeyError`
where `get` would return the default.

## Inline CSS (`aitch.css`)

`aitch.css.box` covers layout, flexbox, sizing, spacing, borders, grid, lists
and tables. `aitch.css.styling` covers backgrounds, typography, visual
effects, scrolling, animation and transitions.

Each function returns a `style` attribute with one declaration. Python keywords
and built-ins get a trailing underscore: `float_` and `filter_`.
`style_property(name, *values)` builds any other property.

Several style attributes on one element merge into `style="a:1; b:2"`. The unit
helpers in `aitch.css.units` (`px`, `pt`, `pc`, `in_`, `cm`, `mm`, `em`, `rem`,
`percent`, `vw`, `vh`, `vmin`, `vmax`, `ch`, `ex`) append their unit.
`aitch.css.constants` holds `IMPORTANT` and keyword enums such as `Display`,
`Position`, `Overflow` and `WhiteSpace`.

```python
from aitch.css.box import width
from aitch.css.constants import IMPORTANT
from aitch.css.styling import background_color
from aitch.css.units import px

box = element(
    "p",
    width(px(DynamicValueKey("width"))),
    when("isAdmin", background_color("red")),
    "My paragraph with inline style",
)
# with data {"width": 10, "isAdmin": True}:
# <p style="width:10px; background-color:red">My paragraph with inline style</p>
```

## What it does not do

* There are no ready-made per-tag functions such as `p()` or `div()`. Build
  elements with `element(name, ...)`.
* There is no document or doctype helper, and no loop or iteration node. To
  repeat content from data, use `content_collect`.
* There is no integration with text templates.
* The package has no command-line tool.