from mapkha.acceptor import AccPool, DictAcceptor
from mapkha.dictionary import make_dict


def test_transit_reaches_final():
    dictionary = make_dict(["กา"])
    acc = DictAcceptor()
    acc.reset(0)
    acc.transit("ก", dictionary)
    assert acc.valid and not acc.final and acc.offset == 1
    acc.transit("า", dictionary)
    assert acc.valid and acc.final and acc.offset == 2


def test_transit_unknown_char_invalidates():
    dictionary = make_dict(["กา"])
    acc = DictAcceptor()
    acc.reset(0)
    acc.transit("ข", dictionary)
    assert acc.valid is False
    assert acc.offset == 0


def test_reset_clears_state():
    dictionary = make_dict(["กา"])
    acc = DictAcceptor()
    acc.reset(0)
    acc.transit("ก", dictionary)
    acc.transit("x", dictionary)
    acc.reset(3)
    assert (acc.p, acc.offset, acc.final, acc.valid) == (3, 0, False, True)


def test_pool_obtain_gives_reset_acceptors():
    pool = AccPool()
    a = pool.obtain(0)
    b = pool.obtain(2)
    assert a is not b
    assert (a.p, b.p) == (0, 2)
    assert a.valid and b.valid


def test_pool_reuses_after_reset():
    dictionary = make_dict(["กา"])
    pool = AccPool()
    first = pool.obtain(0)
    first.transit("ก", dictionary)
    pool.reset()
    again = pool.obtain(0)
    assert again is first
    assert again.offset == 0 and again.valid and not again.final