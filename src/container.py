'''
Generic in-memory container used for vehicles, drivers and passengers.
Items are kept in insertion order and can only be appended.
'''

import pandas as pd


class Container:
    """Append-only ordered collection of items"""

    def __init__(self, name="items"):
        self.name = name   # Label used in printed output
        self._items = []   # Insertion-ordered storage, never shrinks

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    @property
    def items(self):
        """Copy of the stored items in insertion order"""
        return list(self._items)

    def add(self, item):
        """Append an item to the end of the container"""
        self._items.append(item)
        print(f"Added: {item}")

    def first(self):
        """Return the earliest added item, or None when empty"""
        if not self._items:
            return None
        return self._items[0]

    def show_all(self):
        """Print every item as a table and return them in order"""
        if not self._items:
            print(f"Contents: (empty {self.name})")
            return []

        print("\n" + "=" * 50)
        print(f"Contents: {len(self._items)} {self.name}")
        print(self.to_frame().to_string(index=False))
        print("=" * 50)
        return self.items

    def to_frame(self):
        """Build a DataFrame with one row per item"""
        rows = []
        for item in self._items:
            # Records expose their fields through get_info(); plain values get a single column
            if hasattr(item, "get_info"):
                rows.append(item.get_info())
            else:
                rows.append({"value": item})
        return pd.DataFrame(rows)
