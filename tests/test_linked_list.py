from dataclasses import dataclass

from carehub.linked_list import LinkedList, UniqueAttribute


@dataclass
class Item(UniqueAttribute):
    id: int
    name: str

    def uattr(self) -> str:
        return str(self.id)


def test_push_front():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    assert len(items) == 1
    assert items.head.value.id == 1


def test_pop():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    popped = items.pop()
    assert popped.id == 1
    assert items.is_empty()


def test_pop_empty_returns_none():
    assert LinkedList().pop() is None


def test_get_by_index():
    items = LinkedList()
    items.push_front(Item(0, "Alice"))
    items.push_front(Item(1, "Bob"))
    assert items.get_by_index(0).id == 1
    assert items.get_by_index(1).id == 0
    assert items.get_by_index(2) is None


def test_get_by_uniq_attr():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    items.push_front(Item(2, "Bob"))
    assert items.get_by_uniq_attr("1").id == 1
    assert items.get_by_uniq_attr("9") is None


def test_remove_last_node():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    items.push_front(Item(2, "Bob"))
    removed = items.remove_last_node()
    assert removed.id == 1
    assert len(items) == 1
    assert items.head.value.id == 2


def test_remove_by_uniq_attr():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    items.push_front(Item(2, "Bob"))
    assert items.remove_by_uniq_attr("1")
    assert len(items) == 1
    assert items.head.value.id == 2


def test_remove_by_uniq_attr_missing():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    assert not items.remove_by_uniq_attr("5")
    assert len(items) == 1


def test_iter():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    items.push_front(Item(2, "Bob"))
    assert [item.id for item in items] == [2, 1]


def test_iter_allows_mutation():
    items = LinkedList()
    items.push_front(Item(1, "Alice"))
    items.push_front(Item(2, "Bob"))
    for item in items:
        item.name += " Updated"
    assert [item.name for item in items] == ["Bob Updated", "Alice Updated"]


def test_remove_and_contains_preserve_order():
    numbers = LinkedList()
    for n in (1, 2, 3, 4):
        numbers.insert(n)
    assert 3 in numbers
    assert numbers.remove(3)
    assert 3 not in numbers
    assert list(numbers) == [4, 2, 1]
    assert len(numbers) == 3
    assert not numbers.remove(42)


def test_reverse():
    numbers = LinkedList()
    for n in (1, 2, 3):
        numbers.push_front(n)
    numbers.reverse()
    assert list(numbers) == [1, 2, 3]
    assert len(numbers) == 3


def test_display(capsys):
    numbers = LinkedList()
    numbers.push_front(1)
    numbers.push_front(2)
    numbers.display()
    assert capsys.readouterr().out == "2 -> 1 -> None\n"