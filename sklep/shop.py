"""The shop's product catalogue, the cart and its receipt."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

StrPath = Union[str, "PathLike[str]"]


class EmptyCartError(LookupError):
    """Raised when the cart is used while no product is selected."""


@dataclass(frozen=True)
class Product:
    """A product with its price in złoty."""

    name: str
    price: float


PRODUCTS: tuple[Product, ...] = tuple(
    Product(name, price)
    for name, price in (
        ("Ser Cheddar (200g)", 8.50),
        ("Jogurt naturalny (1L)", 5.00),
        ("Śmietana 18% (300ml)", 3.80),
        ("Ser kozi (150g)", 10.00),
        ("Mleko bez laktozy 1L", 4.50),
        ("Filet z kurczaka (1kg)", 18.00),
        ("Mielona wołowina (500g)", 12.00),
        ("Kiełbasa śląska (1kg)", 16.00),
        ("Boczek wędzony (200g)", 8.00),
        ("Indyk piersi (1kg)", 20.00),
        ("Jabłka (1kg)", 4.00),
        ("Pomarańcze (1kg)", 5.50),
        ("Winogrono (1kg)", 7.00),
        ("Truskawki (500g)", 6.00),
        ("Maliny (150g)", 5.00),
        ("Marchew (1kg)", 2.50),
        ("Ziemniaki (5kg)", 10.00),
        ("Cebula (1kg)", 3.00),
        ("Czosnek (100g)", 3.50),
        ("Sałata lodowa", 3.00),
        ("Bułki kajzerki (6 szt.)", 4.50),
        ("Croissant", 3.50),
        ("Bagietka francuska", 3.00),
        ("Chleb razowy (500g)", 6.00),
        ("Bułki grahamki (4 szt.)", 5.00),
        ("Tuńczyk w puszce (150g)", 6.00),
        ("Fasola czerwona w puszce (400g)", 4.00),
        ("Kukurydza konserwowa (340g)", 3.50),
        ("Pomidory w puszce (400g)", 5.00),
        ("Zupa pomidorowa (400ml)", 6.50),
        ("Chipsy solone (150g)", 5.50),
        ("Orzechy włoskie (200g)", 10.00),
        ("Migdały (200g)", 12.00),
        ("Paluszki słone (200g)", 4.00),
        ("Popcorn naturalny (100g)", 3.00),
        ("Woda gazowana 1.5L", 2.50),
        ("Sok jabłkowy 1L", 4.50),
        ("Kawa mielona 250g", 12.00),
        ("Herbata czarna (50 torebek)", 8.00),
        ("Napój energetyczny 250ml", 4.00),
        ("Ketchup (500ml)", 6.00),
        ("Majonez (400ml)", 7.00),
        ("Musztarda (200g)", 4.50),
        ("Sos sojowy (250ml)", 8.00),
        ("Oliwa z oliwek 500ml", 18.00),
        ("Pizza mrożona (450g)", 12.00),
        ("Mix warzyw mrożonych (1kg)", 8.00),
        ("Frytki mrożone (1kg)", 9.00),
        ("Lody waniliowe (1L)", 10.00),
        ("Szpinak mrożony (500g)", 6.00),
        ("Kasza gryczana (500g)", 5.50),
        ("Płatki owsiane (500g)", 4.00),
        ("Mąka pszenna (1kg)", 3.50),
        ("Makaron pełnoziarnisty (500g)", 6.50),
        ("Komosa ryżowa (200g)", 8.00),
        ("Sos pomidorowy (500g)", 7.00),
        ("Tortille pszenne (6 szt.)", 6.00),
        ("Mleko kokosowe (400ml)", 8.00),
        ("Ryż basmati (1kg)", 9.00),
        ("Cynamon mielony (50g)", 5.00),
        ("Miód naturalny (500g)", 15.00),
        ("Dżem truskawkowy (300g)", 6.00),
        ("Ser feta (200g)", 8.00),
        ("Oliwki zielone (200g)", 7.00),
        ("Kapary (100g)", 9.00),
        ("Jogurt grecki (150g)", 4.50),
        ("Maślanka 1L", 3.80),
        ("Szynka parmeńska (100g)", 12.00),
        ("Kiełbasa krakowska (500g)", 14.00),
        ("Gruszki (1kg)", 5.00),
        ("Kiwi (1kg)", 8.00),
        ("Papryka czerwona (1kg)", 7.00),
        ("Cukinia (1kg)", 5.00),
        ("Rogal z marmoladą", 3.50),
        ("Chleb orkiszowy (500g)", 7.00),
        ("Batonik zbożowy", 2.50),
        ("Prażynki solone", 3.00),
        ("Sok wielowarzywny 1L", 6.00),
        ("Herbata zielona (20 torebek)", 7.00),
        ("Ocet balsamiczny (250ml)", 15.00),
        ("Sos barbecue (300ml)", 9.00),
        ("Pierogi ruskie (1kg)", 12.00),
        ("Mrożone owoce jagodowe (500g)", 10.00),
        ("Kasza jaglana (500g)", 4.50),
        ("Otręby pszenne (500g)", 3.50),
        ("Hummus (200g)", 6.00),
        ("Pesto (190g)", 11.00),
        ("Żelatyna (50g)", 3.00),
        ("Drożdże świeże (100g)", 2.50),
        ("Cukier wanilinowy (50g)", 4.00),
    )
)


def format_price(price: float) -> str:
    """A price with exactly two decimal places."""
    return f"{price:.2f}"


def cart_summary(count: int, total: float) -> str:
    """The message shown after products are put in the cart."""
    return (
        f"Dodano {count} przedmiot(ów) do koszyka.\n"
        f"Łączna cena: {format_price(total)} zł"
    )


class Cart:
    """The products of a catalogue that are selected for purchase."""

    def __init__(self, products: Iterable[Product] = PRODUCTS) -> None:
        self.products: tuple[Product, ...] = tuple(products)
        self._chosen: set[int] = set()

    def select(self, index: int, checked: bool) -> None:
        """Select or deselect the product at ``index`` of the catalogue."""
        if not 0 <= index < len(self.products):
            raise IndexError(f"no product at index {index}")
        if checked:
            self._chosen.add(index)
        else:
            self._chosen.discard(index)

    def selected(self) -> list[Product]:
        """Selected products, in catalogue order."""
        return [
            product for index, product in enumerate(self.products) if index in self._chosen
        ]

    def count(self) -> int:
        """Number of selected products."""
        return len(self._chosen)

    def total(self) -> float:
        """Sum of the selected products' prices as they are shown."""
        return sum(float(format_price(product.price)) for product in self.selected())

    def _require_selection(self) -> list[Product]:
        chosen = self.selected()
        if not chosen:
            raise EmptyCartError("Nie wybrano żadnych produktów.")
        return chosen

    def summary(self) -> str:
        """The cart message for the current selection."""
        self._require_selection()
        return cart_summary(self.count(), self.total())

    def receipt(self) -> str:
        """The receipt text for the current selection."""
        chosen = self._require_selection()
        lines = ["Paragon - zakupione produkty:\n\n"]
        lines.extend(
            f"- {product.name}: {format_price(product.price)} zł\n" for product in chosen
        )
        lines.append(f"\nŁączna kwota: {format_price(self.total())} zł\n")
        return "".join(lines)

    def save_receipt(self, path: StrPath) -> None:
        """Write the receipt to ``path``."""
        text = self.receipt()
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(text)