import pytest

from sklep.shopping_list import (
    NothingSelectedError,
    ShoppingItem,
    ShoppingList,
    parse_list,
)


def make_list(*names):
    shopping = ShoppingList()
    for name in names:
        shopping.add(name)
    return shopping


def test_add_strips_text_and_starts_unchecked():
    shopping = ShoppingList()
    item = shopping.add("  Mleko  ")
    assert item == ShoppingItem("Mleko", False)
    assert [entry.text for entry in shopping] == ["Mleko"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_ignores_blank_text(text):
    shopping = make_list("Chleb")
    assert shopping.add(text) is None
    assert len(shopping) == 1


def test_to_text_numbers_from_one():
    shopping = make_list("Mleko", "Chleb")
    assert shopping.to_text() == "1. Mleko\n2. Chleb\n"


def test_to_text_of_empty_list_is_empty():
    assert ShoppingList().to_text() == ""


def test_parse_list_drops_numbers_and_blank_lines():
    items = parse_list("1. Mleko\n\n   \n12.   Jajka\nMasło\n")
    assert [item.text for item in items] == ["Mleko", "Jajka", "Masło"]
    assert all(not item.checked for item in items)


def test_parse_list_only_drops_leading_number():
    items = parse_list("3. Woda 1.5L")
    assert [item.text for item in items] == ["Woda 1.5L"]


def test_parse_list_inverts_to_text():
    shopping = make_list("Ser", "Kawa mielona 250g", "Sok 1L")
    assert [item.text for item in parse_list(shopping.to_text())] == [
        item.text for item in shopping
    ]


def test_remove_checked_without_selection_raises():
    shopping = make_list("Ser", "Kawa")
    with pytest.raises(NothingSelectedError):
        shopping.remove_checked()
    assert len(shopping) == 2


def test_remove_checked_keeps_order_of_the_rest():
    shopping = make_list("A", "B", "C", "D")
    shopping.set_checked(1, True)
    shopping.set_checked(3, True)
    removed = shopping.remove_checked()
    assert [item.text for item in removed] == ["B", "D"]
    assert [item.text for item in shopping] == ["A", "C"]


def test_unchecking_takes_entry_out_of_removal():
    shopping = make_list("A", "B")
    shopping.set_checked(0, True)
    shopping.set_checked(0, False)
    with pytest.raises(NothingSelectedError):
        shopping.remove_checked()


def test_clear_empties_the_list():
    shopping = make_list("A", "B")
    shopping.clear()
    assert len(shopping) == 0


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "lista.txt"
    shopping = make_list("Śmietana 18%", "Żelatyna (50g)")
    shopping.set_checked(0, True)
    shopping.save(path)

    loaded = ShoppingList()
    loaded.load(path)
    assert [item.text for item in loaded] == ["Śmietana 18%", "Żelatyna (50g)"]
    assert all(not item.checked for item in loaded)
    assert path.read_text(encoding="utf-8") == shopping.to_text()


def test_load_replaces_existing_entries(tmp_path):
    path = tmp_path / "lista.txt"
    path.write_text("1. Nowe\n", encoding="utf-8")
    shopping = make_list("Stare")
    shopping.load(path)
    assert [item.text for item in shopping] == ["Nowe"]


def test_load_missing_file_leaves_list_untouched(tmp_path):
    shopping = make_list("Stare")
    with pytest.raises(FileNotFoundError):
        shopping.load(tmp_path / "brak.txt")
    assert [item.text for item in shopping] == ["Stare"]