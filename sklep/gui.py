"""The desktop window of the shopping list and the shop dialog."""

from __future__ import annotations

import colorsys
import tkinter as tk
from functools import partial
from tkinter import filedialog, messagebox, ttk
from typing import Iterable, Sequence

from sklep.shop import PRODUCTS, Cart, EmptyCartError, Product, format_price
from sklep.shopping_list import NothingSelectedError, ShoppingList

_TITLE = "Komunikat"
_TEXT_FILES = [("Pliki tekstowe", "*.txt")]
_CHECKED = "☑"
_UNCHECKED = "☐"


def _hex(rgb: Sequence[int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _lighter(rgb: Sequence[int], factor: int = 150) -> tuple[int, int, int]:
    """Brighten a colour, trading saturation once full brightness is reached."""
    h, s, v = colorsys.rgb_to_hsv(*(channel / 255 for channel in rgb))
    v *= factor / 100
    if v > 1.0:
        s = max(0.0, s - (v - 1.0))
        v = 1.0
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return round(r * 255), round(g * 255), round(b * 255)


def dark_palette() -> dict[str, str]:
    """Colours of the dark theme, by role, as ``#rrggbb`` strings."""
    return {
        "window": _hex((53, 53, 53)),
        "base": _hex((42, 42, 42)),
        "alternate_base": _hex((66, 66, 66)),
        "tooltip_base": _hex((53, 53, 53)),
        "text": _hex((128, 128, 128)),
        "button": _hex((53, 53, 53)),
        "highlight": _hex(_lighter((142, 45, 197))),
        "highlighted_text": _hex((255, 255, 255)),
    }


class MainWindow(tk.Frame):
    """The shopping list window."""

    def __init__(self, master: tk.Misc | None = None) -> None:
        super().__init__(master, padx=8, pady=8)
        root = self.winfo_toplevel()
        root.title("Shopping List")
        self._default_background = root.cget("background")
        self.shopping_list = ShoppingList()
        self._check_vars: list[tk.BooleanVar] = []

        top = tk.Frame(self)
        self.input_field = tk.Entry(top)
        self.input_field.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.input_field.bind("<Return>", lambda _event: self.on_add_item())
        tk.Button(top, text="Dodaj", command=self.on_add_item).pack(side=tk.LEFT)
        top.pack(fill=tk.X)

        self._list_frame = tk.Frame(self, relief=tk.SUNKEN, borderwidth=1)
        self._list_frame.pack(fill=tk.BOTH, expand=True, pady=4)

        bottom = tk.Frame(self)
        for label, command in (
            ("Usuń", self.on_remove_items),
            ("Zapisz", self.on_save_to_file),
            ("Wczytaj", self.on_load_from_file),
            ("Sklep", self.open_shop),
        ):
            tk.Button(bottom, text=label, command=command).pack(
                side=tk.LEFT, fill=tk.X, expand=True
            )
        bottom.pack(fill=tk.X)

        self._dark_mode = tk.BooleanVar(value=False)
        tk.Checkbutton(
            self,
            text="Tryb ciemny",
            variable=self._dark_mode,
            command=lambda: self.on_dark_mode_toggled(self._dark_mode.get()),
        ).pack(anchor=tk.W)

    def _refresh(self) -> None:
        for child in self._list_frame.winfo_children():
            child.destroy()
        self._check_vars = []
        for index, item in enumerate(self.shopping_list):
            var = tk.BooleanVar(value=item.checked)
            self._check_vars.append(var)
            tk.Checkbutton(
                self._list_frame,
                text=item.text,
                variable=var,
                anchor=tk.W,
                command=partial(self._on_check, index, var),
            ).pack(fill=tk.X)

    def _on_check(self, index: int, var: tk.BooleanVar) -> None:
        self.shopping_list.set_checked(index, var.get())

    def on_add_item(self) -> None:
        """Add the typed text to the list."""
        if self.shopping_list.add(self.input_field.get()) is None:
            return
        self._refresh()
        messagebox.showinfo(_TITLE, "Dodano element", parent=self)
        self.input_field.delete(0, tk.END)

    def on_remove_items(self) -> None:
        """Remove the checked entries."""
        try:
            self.shopping_list.remove_checked()
        except NothingSelectedError:
            messagebox.showwarning(_TITLE, "Nie wybrano produktu do usunięcia", parent=self)
            return
        self._refresh()
        messagebox.showinfo(_TITLE, "Usunięto zaznaczone elementy", parent=self)

    def on_save_to_file(self) -> None:
        """Ask for a file and save the list to it."""
        path = filedialog.asksaveasfilename(
            parent=self, title="Zapisz listę zakupów", filetypes=_TEXT_FILES
        )
        if not path:
            return
        try:
            self.shopping_list.save(path)
        except OSError:
            return
        messagebox.showinfo(_TITLE, "Lista została zapisana", parent=self)

    def on_load_from_file(self) -> None:
        """Ask for a file and replace the list with its entries."""
        path = filedialog.askopenfilename(
            parent=self, title="Wczytaj listę zakupów", filetypes=_TEXT_FILES
        )
        if not path:
            return
        try:
            self.shopping_list.load(path)
        except OSError:
            return
        self._refresh()
        messagebox.showinfo(_TITLE, "Lista została wczytana", parent=self)

    def on_dark_mode_toggled(self, enabled: bool) -> None:
        """Switch between the dark theme and the default colours."""
        root = self.winfo_toplevel()
        if enabled:
            colours = dark_palette()
            root.tk_setPalette(
                background=colours["window"],
                foreground=colours["text"],
                activeBackground=colours["button"],
                activeForeground=colours["text"],
                highlightColor=colours["highlight"],
                selectBackground=colours["highlight"],
                selectForeground=colours["highlighted_text"],
                selectColor=colours["base"],
                insertBackground=colours["text"],
                troughColor=colours["alternate_base"],
            )
        else:
            root.tk_setPalette(self._default_background)

    def open_shop(self) -> None:
        """Show the shop dialog and wait until it is closed."""
        dialog = ShopDialog(self)
        dialog.wait_window()


class ShopDialog(tk.Toplevel):
    """A modal dialog listing the products to buy."""

    def __init__(
        self, parent: tk.Misc | None = None, products: Iterable[Product] = PRODUCTS
    ) -> None:
        super().__init__(parent)
        self.title("Sklep")
        self.geometry("600x500")
        self.cart = Cart(products)

        body = tk.Frame(self)
        self.product_table = ttk.Treeview(
            body, columns=("name", "price", "buy"), show="headings", selectmode="none"
        )
        for column, heading in (("name", "Produkt"), ("price", "Cena (zł)"), ("buy", "Kup")):
            self.product_table.heading(column, text=heading)
            self.product_table.column(column, stretch=True)
        for index, product in enumerate(self.cart.products):
            self.product_table.insert(
                "",
                tk.END,
                iid=str(index),
                values=(product.name, format_price(product.price), _UNCHECKED),
            )
        scrollbar = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.product_table.yview)
        self.product_table.configure(yscrollcommand=scrollbar.set)
        self.product_table.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        body.pack(fill=tk.BOTH, expand=True)
        self.product_table.bind("<Button-1>", self._on_click)

        tk.Button(
            self, text="Dodaj do koszyka", command=self.on_add_to_cart_clicked
        ).pack(fill=tk.X)

        if parent is not None:
            self.transient(parent)
        self.grab_set()

    def _on_click(self, event: tk.Event) -> str | None:
        table = self.product_table
        if table.identify_region(event.x, event.y) != "cell":
            return None
        if table.identify_column(event.x) != "#3":
            return None
        row = table.identify_row(event.y)
        if not row:
            return None
        checked = table.set(row, "buy") != _CHECKED
        self.cart.select(int(row), checked)
        table.set(row, "buy", _CHECKED if checked else _UNCHECKED)
        return "break"

    def _ask_buy(self, message: str) -> bool:
        """Show the cart message; True when the user chooses to buy."""
        box = tk.Toplevel(self)
        box.title("Koszyk")
        box.transient(self)
        tk.Label(box, text=message, justify=tk.LEFT, padx=12, pady=12).pack()
        answer = [False]

        def choose(buy: bool) -> None:
            answer[0] = buy
            box.destroy()

        buttons = tk.Frame(box)
        tk.Button(buttons, text="Kup", command=partial(choose, True)).pack(side=tk.LEFT)
        tk.Button(buttons, text="Kontynuuj zakupy", command=partial(choose, False)).pack(
            side=tk.LEFT
        )
        buttons.pack(pady=(0, 12))
        box.protocol("WM_DELETE_WINDOW", partial(choose, False))
        box.grab_set()
        box.wait_window()
        self.grab_set()
        return answer[0]

    def on_add_to_cart_clicked(self) -> None:
        """Summarise the cart and, if the user buys, save a receipt."""
        try:
            message = self.cart.summary()
        except EmptyCartError:
            messagebox.showinfo(_TITLE, "Nie wybrano żadnych produktów.", parent=self)
            return
        if not self._ask_buy(message):
            return
        path = filedialog.asksaveasfilename(
            parent=self, title="Zapisz paragon", filetypes=_TEXT_FILES
        )
        if not path:
            return
        try:
            self.cart.save_receipt(path)
        except OSError:
            messagebox.showwarning(_TITLE, "Nie udało się zapisać pliku.", parent=self)
            return
        messagebox.showinfo(_TITLE, "Paragon został zapisany.", parent=self)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the shopping list window; ``argv`` is accepted but not used."""
    root = tk.Tk()
    window = MainWindow(root)
    window.pack(fill=tk.BOTH, expand=True)
    root.mainloop()
    return 0