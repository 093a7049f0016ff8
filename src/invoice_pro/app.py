from invoice_pro.core.services.storage import JsonStorage
from invoice_pro.core.services.store import InvoiceStore
from invoice_pro.ui.layouts.main_window import MainWindow


def main() -> None:
    store = InvoiceStore(JsonStorage())
    app = MainWindow(store)
    app.mainloop()


if __name__ == "__main__":
    main()
