import pytest

from malones.dialogue import MALONES_SCRIPT, InvalidStateError, create_session
from malones.models import DialogueScript

FINAL_REPLY = "Maybe a pint will cheer you up ya miserable git! Come in!"


def test_starts_with_malones_question():
    game = create_session()
    assert game.start() == "Should you come into Malones?"


def test_start_does_not_move_cursor():
    game = create_session()
    game.start()
    game.start()
    assert game.question_number == 0


def test_yes_reply_from_any_position():
    game = create_session()
    for _ in range(len(game.questions) + 2):
        assert game.answer_yes() == "Well then come in so!"
        game.answer_no()


def test_no_on_last_question_gives_final_reply():
    game = create_session()
    game.question_number = len(game.questions) - 1
    assert game.no() == FINAL_REPLY


def test_no_walks_questions_in_order():
    game = create_session()
    for i in range(len(game.questions)):
        if i != len(game.questions) - 1:
            current = game.question_number
            assert game.no() == game.questions[current + 1]
        else:
            assert game.no() == FINAL_REPLY


def test_no_past_the_end_keeps_final_reply():
    game = create_session()
    for _ in range(len(game.questions) - 1):
        game.answer_no()
    assert game.is_last_question
    for _ in range(3):
        assert game.answer_no() == FINAL_REPLY
    assert game.question_number == len(game.questions) - 1


def test_yes_does_not_end_the_session():
    game = create_session()
    game.no()
    game.yes()
    assert game.start() == "Are you Irish?"
    assert game.no() == "Do you want to be?"


def test_sessions_are_independent():
    a = create_session()
    b = create_session()
    a.no()
    a.no()
    assert b.question_number == 0
    assert b.start() == "Should you come into Malones?"


def test_reset():
    game = create_session()
    game.no()
    game.yes()
    game.reset()
    assert game.question_number == 0
    assert game.start() == "Should you come into Malones?"


def test_cursor_out_of_range_raises_invalid_state():
    game = create_session()
    game.question_number = 99
    with pytest.raises(InvalidStateError):
        game.start()
    with pytest.raises(InvalidStateError):
        game.no()


def test_custom_script():
    script = DialogueScript(questions=["Pint?"], yes_reply="Sound.", no_reply="Go on.")
    game = create_session(script)
    assert game.start() == "Pint?"
    assert game.no() == "Go on."
    assert game.yes() == "Sound."
    assert MALONES_SCRIPT.questions[0] == "Should you come into Malones?"


def test_question_list_cannot_be_changed_through_a_session():
    a = create_session()
    with pytest.raises(TypeError):
        a.questions[0] = "Hijacked?"
    assert isinstance(a.questions, tuple)
    assert create_session().start() == "Should you come into Malones?"
