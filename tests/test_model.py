# tests/test_model.py
# MarkovModel: context tables, advance, predict and sample

import pytest

from markov_sequences.core.errors import InvalidOrderError, MarkovError
from markov_sequences.core.model import END, MarkovModel
from markov_sequences.core.sequence import SequenceKey


@pytest.fixture
def model():
    return MarkovModel(1)


def test_starts_empty(model):
    assert len(model) == 0
    assert model.order == 1
    assert model.predict(SequenceKey.empty()) is None
    assert model.sample(SequenceKey.empty(), 0.0) is None


def test_adds_tables_for_each_new_context(model):
    seq = SequenceKey.empty()
    model.add(seq, "a")
    assert len(model) == 1
    assert seq in model
    assert model.table(seq).most_frequent() == "a"

    seq = model.advance(seq, "a")
    model.add(seq, "b")
    assert len(model) == 2
    assert model.table(seq).most_frequent() == "b"


def test_adds_symbols_to_existing_tables(model):
    seq = SequenceKey.empty()
    model.add(seq, "a")
    model.add(seq, "b")
    model.add(seq, "b")
    assert len(model) == 1
    assert model.predict(seq) == "b"
    assert model.table(seq).total == 3


def test_unseen_context_predicts_none_until_trained(model):
    ctx = SequenceKey(("q",))
    assert ctx not in model
    assert model.predict(ctx) is None
    model.add(ctx, "r")
    assert model.predict(ctx) == "r"


def test_reads_do_not_mutate(model):
    seq = SequenceKey.empty()
    model.add(seq, "a")
    model.predict(SequenceKey(("zz",)))
    model.sample(SequenceKey(("zz",)), 0.3)
    model.advance(seq, "new")
    assert len(model) == 1
    assert list(model.contexts()) == [seq]


def test_advance_uses_model_order():
    m = MarkovModel(2)
    seq = SequenceKey.empty()
    for s in "abcd":
        seq = m.advance(seq, s)
    assert seq.symbols == ("c", "d")


def test_order_zero_is_a_unigram_model():
    m = MarkovModel(0)
    seq = SequenceKey.empty()
    for s in "abb":
        m.add(seq, s)
        seq = m.advance(seq, s)
        assert seq == SequenceKey.empty()
    assert len(m) == 1
    assert m.predict(SequenceKey.empty()) == "b"


def test_end_marker_hides_prediction(model):
    seq = SequenceKey(("z",))
    model.add(seq, END)
    assert seq in model
    assert model.predict(seq) is None
    assert model.sample(seq, 0.0) is None


@pytest.mark.parametrize("order", [-1, 1.5, "2", None, True])
def test_rejects_bad_order(order):
    with pytest.raises(InvalidOrderError):
        MarkovModel(order)


def test_invalid_order_is_a_markov_and_value_error():
    with pytest.raises(MarkovError):
        MarkovModel(-3)
    with pytest.raises(ValueError):
        MarkovModel(-3)


def test_sample_scenario_two_sequences():
    m = MarkovModel(1)
    for word in ("abc", "ade"):
        seq = SequenceKey.empty()
        for s in word:
            m.add(seq, s)
            seq = m.advance(seq, s)
        m.add(seq, END)

    empty = SequenceKey.empty()
    assert m.sample(empty, 0.0) == "a"
    after_a = m.advance(empty, "a")
    assert m.sample(after_a, 0.0) == "b"
    assert m.sample(after_a, 0.5) == "d"


def test_empty_constructor_alias():
    m = MarkovModel.empty(3)
    assert m.order == 3
    assert len(m) == 0
