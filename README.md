# inlineforms

This package builds the forms that a game server sends to players. It also
handles the answers that come back from the client. Each element and each form
carries its own optional `submit` callback. The code that reacts to an answer
sits next to the part of the form it belongs to.

There are three kinds of form:

- `inlineforms.custom.Custom` is a form of input elements. These are `Input`,
  `Toggle`, `Slider`, `Dropdown` and `StepSlider`. It may also hold the static
  elements `Label`, `Header` and `Divider`.
- `inlineforms.menu.Menu` has a title, a body text and a list of menu
  elements. Those are `Button`, `Label`, `Header` and `Divider`.
- `inlineforms.modal.Modal` has a title, a body text and two buttons.

All element classes live in `inlineforms.elements`.

## Installation

```
pip install inlineforms
```

The package needs nothing outside the standard library.

## Custom forms

```python
from inlineforms.custom import Custom
from inlineforms.elements import Input, Label, Slider

form = Custom(title="Settings")
form.add(Label(text="Adjust your preferences"))
form.add(Input(text="Nickname", placeholder="Steve",
               submit=lambda text: print("name", text)))
form.add(Slider(text="Volume", min_value=0, max_value=100, step_size=1, default=50,
                submit=lambda value: print("volume", value)))

payload = form.to_json()        # the JSON to send to the client

# Pass the client's raw answer (bytes or str), or None if the form was closed:
form.submit_json(b'["Alex", 75]', tx=None)
```

The answer is a JSON array with one value per element. It may include values
for the static elements, or it may leave them out. Both forms are accepted.

Each element's callback runs first, in order:

- `Input` receives the text.
- `Toggle` receives a bool.
- `Slider` receives a float. The value must lie between `min_value` and
  `max_value`.
- `Dropdown` and `StepSlider` receive `(index, option)`.

After that, the form's own `submit(closed, values, tx)` runs. When the form was
closed, only the form's callback runs, with `closed=True` and `values=None`.

A value is checked only when its element has a `submit` callback.

`Custom.to_dict()` and `to_json()` raise `FormError` when the form has no
elements.

## Menu forms

```python
from inlineforms.elements import Button, Header
from inlineforms.menu import Menu

menu = Menu(title="Warps", content="Pick a destination")
menu.add(Header(text="Worlds"))
menu.add(Button(text="Spawn", image="textures/items/compass_item",
                submit=lambda tx: print("to spawn")))
menu.add(Button(text="Arena", submit=lambda tx: print("to arena")))

payload = menu.to_json()
menu.submit_json(b"1", tx=None)   # runs the Arena button's callback
```

- **Index counting.** The answer is a button index. Only buttons are counted;
  other elements are not.
- **When indices are fixed.** The indices are fixed each time the menu is
  serialised with `to_dict()` or `to_json()`. The menu must therefore be
  serialised before it can handle an answer.
- **Callback order.** The clicked button's callback runs first, then the
  menu's `submit(closed, tx)`.
- **Adding elements.** `Menu.add` raises `TypeError` for elements that are not
  menu elements.

A button's `image` decides how the image is described. An image that starts
with `http:` or `https:` is written out as a `url` image. Any other image is
written out as a `path` image.

## Modal forms

```python
from inlineforms.elements import Button
from inlineforms.modal import Modal

modal = Modal(title="Confirm", content="Really leave?",
              button1=Button(text="Yes", submit=lambda tx: print("bye")),
              button2=Button(text="No"))
modal.submit_json(b"true", tx=None)   # true selects button1, false button2
```

## Serialisation

Every form has two ways to produce its representation:

- `to_dict()` returns a JSON-ready dict.
- `to_json()` returns compact JSON with sorted keys.

Every element has `to_dict()`.

The `tx` argument of `submit_json` is not inspected. It is passed on unchanged
to the callbacks.

## Errors

A malformed or out-of-range answer raises `inlineforms.elements.FormError`.
`FormError` is a subclass of `ValueError`. Such answers include:

- invalid JSON;
- a value of the wrong type;
- an array of the wrong length;
- a slider value out of range;
- a dropdown or step index out of range;
- an invalid button index.

## What it does not do

This package only describes forms and interprets answers. It does not open
connections. It does not send forms to players, and it does not receive their
responses. The server code that uses it does that.

## Running the tests

```
pip install -e ".[test]"
pytest
```