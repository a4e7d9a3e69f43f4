# sklep

A small desktop shopping list with a built-in grocery shop. The interface
text is in Polish.

## Features

- Keep a shopping list: add items, tick them and remove the ticked ones.
- Save the list to a numbered text file (`1. Mleko`, `2. Chleb`, …) and load
  it back; blank lines are skipped and the leading numbers are stripped when
  loading. Loading replaces the current list.
- Browse the shop's price list (`sklep.shop.PRODUCTS`), put products in the
  basket and see how many were chosen and what they cost together.
- Save a receipt of the chosen products, with prices in złoty and the total.
- Switch the window to a dark colour scheme and back.

## Installation

```
pip install .
```

The window uses Tk (`tkinter`), which comes with most Python installations.
There are no other dependencies.

## Running

```
sklep
```

This opens the shopping list window (`sklep.gui.main`). The "Sklep" button
opens the shop dialog; tick products in the "Kup" column and press
"Dodaj do koszyka" to see the basket summary and, after choosing "Kup",
save a receipt.

## Using it from Python

The list and the shop work without a window:

```python
from sklep.shopping_list import ShoppingList, parse_list
from sklep.shop import Cart, format_price, cart_summary

shopping = ShoppingList()
shopping.add("Mleko")
shopping.add("Chleb")
shopping.set_checked(0, True)
shopping.remove_checked()
print(shopping.to_text())        # "1. Chleb\n"
shopping.save("zakupy.txt")

items = parse_list("1. Mleko\n\n2. Chleb\n")   # two unchecked ShoppingItem entries

cart = Cart()
cart.select(0, True)
cart.select(10, True)
print(cart.count(), format_price(cart.total()))
print(cart.summary())
print(cart.receipt())
cart.save_receipt("paragon.txt")
```

`ShoppingList.add` ignores blank text and returns `None` for it.
`ShoppingList.remove_checked` raises `NothingSelectedError` when no item is
ticked. `Cart.select` raises `IndexError` for an index outside the catalogue,
and `Cart.summary`, `Cart.receipt` and `Cart.save_receipt` raise
`EmptyCartError` when the basket is empty. A `Cart` can be given its own
list of `Product` values instead of the built-in catalogue.

Files are written and read as UTF-8.

## Tests

```
pip install .[test]
pytest
```