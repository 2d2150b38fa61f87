import pytest

from rustdrill.solutions.quizzes import (
    Command,
    CommandKind,
    ReportCard,
    calculate_price_of_apples,
    transformer,
)


@pytest.mark.parametrize("quantity, price", [(35, 70), (40, 80), (41, 41), (65, 65)])
def test_verify(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_transformer_works():
    output = transformer([
        ("hello", Command.uppercase()),
        (" all roads lead to rome! ", Command.trim()),
        ("foo", Command.append(1)),
        ("bar", Command.append(5)),
    ])
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_append_constructor_kind():
    command = Command.append(3)
    assert command.kind is CommandKind.APPEND
    assert command.times == 3


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.render() == "Gary Plotter (11) - achieved a grade of A+"
    assert str(card) == card.render()