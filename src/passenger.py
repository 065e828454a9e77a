'''
Passenger record and the two kinds of extra data a passenger can carry:
a travel card number or an email contact.
'''

from utils import format_money


# --------- Constants ---------
PAYLOAD_KINDS = ["card", "email"]


class Card:
    """Travel card payload"""
    kind = "card"

    def __init__(self, number):
        self.number = number

    def __repr__(self):
        return f"Card({self.number!r})"

    def __eq__(self, other):
        return isinstance(other, Card) and other.number == self.number

    def __str__(self):
        return f"card: {self.number}"


class Email:
    """Email contact payload"""
    kind = "email"

    def __init__(self, email):
        self.email = email

    def __repr__(self):
        return f"Email({self.email!r})"

    def __eq__(self, other):
        return isinstance(other, Email) and other.email == self.email

    def __str__(self):
        return f"email: {self.email}"


def make_payload(kind, value):
    """Build the payload for a kind picked from PAYLOAD_KINDS"""
    if kind == "card":
        return Card(value)
    if kind == "email":
        return Email(value)
    raise ValueError(f"Unknown payload kind: {kind!r}")


class Passenger:
    """Passenger with a balance and a card or email payload"""

    def __init__(self, name, balance, extra):
        self.name = name
        self.balance = balance
        self._extra = extra  # Fixed for the life of the passenger

    @property
    def extra(self):
        return self._extra

    def __repr__(self):
        return f"Passenger(name={self.name!r}, balance={self.balance}, extra={self._extra!r})"

    def get_info(self):
        """Return passenger data as dictionary"""
        return {
            'name': self.name,
            'balance': self.balance,
            'extra': str(self._extra)
        }

    def pay(self, amount):
        """Deduct amount from the balance if it is covered.

        Returns True when the payment went through and False otherwise; the
        balance is untouched on failure.
        """
        if self.balance >= amount:
            self.balance -= amount
            print(f"{self.name} paid {format_money(amount)}. Remaining balance: {format_money(self.balance)}")
            return True

        print(f"{self.name} does not have enough balance.")
        return False
