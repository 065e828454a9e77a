'''
Scripted walkthrough of the transport records without the interactive menu.
Run it directly or through the transport-demo command.
'''

from container import Container
from driver import Driver
from passenger import Card, Email, Passenger
from vehicle import Vehicle


def run_demo():
    """Build a few sample records, print them and make two payments"""
    numbers = Container("numbers")
    numbers.add(10)
    numbers.add(20)
    numbers.show_all()
    print(f"First number: {numbers.first()}")

    bus = Vehicle("BUS-123", "Bus", 50)
    taxi = Vehicle(2024, "Taxi", 4)
    bus.info()
    taxi.info()

    driver = Driver("Carlos", 2000, "LIC-456")
    driver.display()

    ana = Passenger("Ana", 5000, Card("Tarjeta123"))
    luis = Passenger("Luis", 3000, Email("luis@mail.com"))
    results = [ana.pay(2000), luis.pay(4000)]

    print(f"Passenger 1 extra: {ana.extra}")
    print(f"Passenger 2 extra: {luis.extra}")

    return {
        'numbers': numbers,
        'vehicles': [bus, taxi],
        'driver': driver,
        'passengers': [ana, luis],
        'payments': results,
    }


if __name__ == "__main__":
    run_demo()
