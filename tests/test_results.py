import json

import pytest

from userdemo import results
from userdemo.results import Result


def test_empty_result_has_zero_values():
    test = Result()
    assert test.code == ""
    assert test.message == ""
    assert test.data is None
    assert test.to_dict() == {"code": "", "message": "", "data": None}


def test_ok_default():
    r = results.ok_default()
    assert (r.code, r.message) == ("200", "操作成功")
    assert r.success_is()
    assert not r.error_is()


def test_error_default():
    r = results.error_default()
    assert (r.code, r.message) == ("500", "操作失败")
    assert r.error_is()
    assert not r.success_is()


def test_ok_data_and_to_dict():
    r = results.ok_data({"port": 18080})
    assert r.to_dict() == {"code": "200", "message": "操作成功", "data": {"port": 18080}}


def test_error_message_data_serialises_message_data():
    r = results.error_message_data({"name": "bad"})
    d = r.to_dict()
    assert d["messageData"] == {"name": "bad"}
    assert d["code"] == "500"
    assert list(d) == ["code", "message", "messageData", "data"]
    json.dumps(d, ensure_ascii=False)


def test_optional_members_appear_when_set():
    r = Result(code="200", type="t", timestamp="1", encryption="x", extend={"a": 1})
    assert r.to_dict() == {
        "code": "200",
        "message": "",
        "data": None,
        "encryption": "x",
        "type": "t",
        "timestamp": "1",
        "extend": {"a": 1},
    }


@pytest.mark.parametrize(
    "func, code",
    [
        (results.ok_r2, "200"),
        (results.error_r2, "500"),
        (results.illegal_argument_r2, "415"),
    ],
)
def test_r2_functions(func, code):
    first, r = func("msg")
    assert first == code
    assert r.code == code
    assert r.message == "msg"


def test_simple_constructors():
    assert results.ok("fine").code == "200"
    assert results.error("bad").message == "bad"
    assert results.illegal_argument("arg").code == "415"


def test_wrap_family():
    assert results.wrap("201", "m") == Result(code="201", message="m")
    assert results.wrap_r2("201", "m") == ("201", Result(code="201", message="m"))
    assert results.wrap_data("202", "m", [1]) == Result(code="202", message="m", data=[1])
    assert results.wrap_data_r2("202", "m", 3) == ("202", Result(code="202", message="m", data=3))


def test_methods_return_copies():
    base = Result()
    changed = base.ok()
    assert base.code == ""
    assert changed.code == "200"
    assert base.error_message("oops") == Result(code="500", message="oops")
    assert base.code == ""


def test_method_variants():
    base = Result()
    assert base.ok_data(5).data == 5
    assert base.ok_message("hi") == Result(code="200", message="hi")
    assert base.ok_message_data("hi", 1) == Result(code="200", message="hi", data=1)
    assert base.error() == Result(code="500", message="操作失败")
    assert base.error_data(2) == Result(code="500", message="操作失败", data=2)
    assert base.error_message_data("x").message_data == "x"
    assert base.wrap("1", "m", "d") == Result(code="1", message="m", data="d")


def test_rs2_methods():
    r = results.ok_default()
    assert r.rs2_string() == ("200", r)
    assert r.rs2_bool() == (True, r)
    assert results.error_default().rs2() == (False, results.error_default())


def test_set_error_message_changes_in_place():
    r = results.ok_default()
    same = r.set_error_message("boom")
    assert same is r
    assert r.message == "boom"
    assert r.code == "200"


def test_of_applies_options():
    def set_message(r):
        r.message = "hello"

    r = results.of(set_message)
    assert r.code == "200"
    assert r.message == "hello"
    assert results.of() == Result(code="200")