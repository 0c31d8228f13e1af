import json

import pytest

from inlineforms.custom import Custom
from inlineforms.elements import (
    Divider,
    Dropdown,
    FormError,
    Header,
    Input,
    Label,
    Slider,
    Toggle,
)


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


def test_closed_form_calls_submit_with_none():
    rec = Recorder()
    tx = object()
    form = Custom(title="t", elements=[Input()], submit=rec)
    form.submit_json(None, tx)
    assert rec.calls == [(True, None, tx)]


def test_closed_form_without_submit_is_silent():
    form = Custom(elements=[Input()])
    assert form.submit_json(None) is None


def test_values_reach_elements_and_form():
    text_rec, toggle_rec, form_rec = Recorder(), Recorder(), Recorder()
    tx = object()
    form = Custom(
        elements=[Input(submit=text_rec), Toggle(submit=toggle_rec)],
        submit=form_rec,
    )
    form.submit_json(json.dumps(["hello", True]), tx)
    assert text_rec.calls == [("hello",)]
    assert toggle_rec.calls == [(True,)]
    assert form_rec.calls == [(False, ["hello", True], tx)]


def test_bytes_data_accepted():
    rec = Recorder()
    form = Custom(elements=[Slider(min_value=0, max_value=10, submit=rec)])
    form.submit_json(b"[5]")
    assert rec.calls == [(5.0,)]


def test_static_elements_skipped_when_lengths_differ():
    rec = Recorder()
    form = Custom(elements=[Header("h"), Label("l"), Divider(), Input(submit=rec)])
    form.submit_json('["x"]')
    assert rec.calls == [("x",)]


def test_static_elements_consume_values_when_lengths_match():
    rec = Recorder()
    form = Custom(elements=[Label("l"), Input(submit=rec)])
    form.submit_json('[null, "y"]')
    assert rec.calls == [("y",)]


def test_element_callbacks_run_before_form_submit():
    order = []
    form = Custom(
        elements=[Toggle(submit=lambda v: order.append("element"))],
        submit=lambda closed, values, tx: order.append("form"),
    )
    form.submit_json("[false]")
    assert order == ["element", "form"]


def test_wrong_number_of_values():
    form = Custom(elements=[Input(), Toggle()])
    with pytest.raises(FormError, match="does not have enough values"):
        form.submit_json('["a", true, 3]')


def test_invalid_json():
    form = Custom(elements=[Input()])
    with pytest.raises(FormError, match="error decoding JSON"):
        form.submit_json("[")


def test_non_array_json():
    form = Custom(elements=[Input()])
    with pytest.raises(FormError):
        form.submit_json('{"a": 1}')


def test_element_error_is_wrapped():
    form_rec = Recorder()
    form = Custom(elements=[Toggle(submit=lambda v: None)], submit=form_rec)
    with pytest.raises(FormError, match="error parsing form response value"):
        form.submit_json('["no"]')
    assert form_rec.calls == []


def test_dropdown_out_of_range_is_rejected():
    form = Custom(elements=[Dropdown(options=["a", "b"], submit=lambda i, o: None)])
    with pytest.raises(FormError):
        form.submit_json("[2]")


def test_add_appends_element():
    form = Custom()
    first, second = Label("a"), Input("b")
    form.add(first)
    form.add(second)
    assert form.elements == [first, second]


def test_to_dict_requires_elements():
    with pytest.raises(FormError, match="requires at least one element"):
        Custom(title="t").to_dict()
    with pytest.raises(FormError):
        Custom(title="t").to_json()


def test_to_dict_layout():
    elements = [Label("l"), Input("i", default="d", placeholder="p")]
    form = Custom(title="Title", elements=elements)
    assert form.to_dict() == {
        "type": "custom_form",
        "title": "Title",
        "content": [e.to_dict() for e in elements],
    }


def test_to_json_round_trip():
    form = Custom(title="T", elements=[Toggle("x", default=True), Divider()])
    assert json.loads(form.to_json()) == form.to_dict()