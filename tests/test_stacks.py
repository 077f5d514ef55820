import pytest

from teachos.stacks import ArrayStack, ListStack, Stack, fill_self_test, main


@pytest.mark.parametrize("make", [lambda: ArrayStack(5), ListStack])
def test_last_in_first_out(make):
    stack = make()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


@pytest.mark.parametrize("make", [lambda: ArrayStack(5), ListStack])
def test_pop_empty_raises(make):
    with pytest.raises(IndexError):
        make().pop()


def test_array_stack_fills_up():
    stack = ArrayStack(2)
    stack.push(1)
    assert not stack.is_full()
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(IndexError):
        stack.push(3)
    assert len(stack) == 2


def test_array_stack_size_must_be_positive():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_list_stack_never_full():
    stack = ListStack()
    for value in range(1000):
        stack.push(value)
    assert not stack.is_full()
    assert len(stack) == 1000


def test_stack_is_abstract():
    with pytest.raises(TypeError):
        Stack()


@pytest.mark.parametrize("make", [lambda: ArrayStack(10), ListStack])
def test_self_test_output(make, capsys):
    stack = make()
    lines = stack.self_test(10)
    pushed = [f"pushing {n}" for n in range(17, 27)]
    popped = [f"popping {n}" for n in range(26, 16, -1)]
    assert lines == pushed + popped
    assert capsys.readouterr().out.splitlines() == lines
    assert stack.is_empty()


def test_self_test_overflow_raises():
    with pytest.raises(IndexError):
        ArrayStack(2).self_test(3)


def test_fill_self_test():
    stack = ArrayStack(3)
    lines = fill_self_test(stack)
    assert lines == [
        "pushing 17",
        "pushing 18",
        "pushing 19",
        "popping 19",
        "popping 18",
        "popping 17",
    ]
    assert stack.is_empty()


def test_main(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Testing ArrayStack"
    assert out[21] == "Testing ListStack"
    assert out[1] == "pushing 17"
    assert out[-1] == "popping 17"
    assert len(out) == 42