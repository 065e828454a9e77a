from container import Container
from driver import Driver
from passenger import PAYLOAD_KINDS, Passenger, make_payload
from utils import to_number, to_non_negative
from vehicle import VEHICLE_TYPES, Vehicle

MENU_OPTIONS = [
    ("1", "Add Vehicle"),
    ("2", "View All Vehicles"),
    ("3", "Add Driver"),
    ("4", "View All Drivers"),
    ("5", "Add Passenger"),
    ("6", "View All Passengers"),
    ("0", "Exit"),
]


class TransportSystem:
    """Core system for managing vehicles, drivers and passengers in memory"""

    def __init__(self):
        """Create the three containers for the session"""
        self.vehicles = Container("vehicles")
        self.drivers = Container("drivers")
        self.passengers = Container("passengers")

    def display_menu(self):
        """Display main system menu"""
        print("\n" + "="*50)
        print("Transport System")
        for key, label in MENU_OPTIONS:
            print(f"{key}. {label}")
        print("="*50)

    def handle_choice(self, choice):
        """Run one menu option; returns False when the user asked to exit"""
        choice = choice.strip()
        if choice == "1":
            self.add_vehicle()
        elif choice == "2":
            self.vehicles.show_all()
        elif choice == "3":
            self.add_driver()
        elif choice == "4":
            self.drivers.show_all()
        elif choice == "5":
            self.add_passenger()
        elif choice == "6":
            self.passengers.show_all()
        elif choice == "0":
            print("Exiting the program...")
            return False
        else:
            print("Invalid option, please try again.")
        return True

    def choose(self, title, options):
        """Prompt with a numbered list until one of the options is picked"""
        while True:
            print(title)
            for number, option in enumerate(options, start=1):
                print(f"  {number}. {option}")
            answer = input(f"Select (1-{len(options)}): ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            # Accept the option name itself too
            for option in options:
                if answer.lower() == option.lower():
                    return option
            print("Invalid option, please try again.")

    def add_vehicle(self):
        """Prompt for vehicle data and store it"""
        vehicle_id = input("Vehicle ID: ")
        vehicle_type = self.choose("Vehicle type:", VEHICLE_TYPES)
        capacity = int(to_non_negative(input("Vehicle capacity: ")))
        vehicle = Vehicle(vehicle_id, vehicle_type, capacity)
        self.vehicles.add(vehicle)
        return vehicle

    def add_driver(self):
        """Prompt for driver data and store it"""
        name = input("Driver name: ")
        salary = to_non_negative(input("Driver salary: "))
        license = input("Driver license: ")
        driver = Driver(name, salary, license)
        self.drivers.add(driver)
        return driver

    def add_passenger(self):
        """Prompt for passenger data and store it"""
        name = input("Passenger name: ")
        balance = to_number(input("Passenger starting balance: "))
        kind = self.choose("Extra data type:", PAYLOAD_KINDS)
        if kind == "card":
            value = input("Card number: ")
        else:
            value = input("Passenger email: ")
        passenger = Passenger(name, balance, make_payload(kind, value))
        self.passengers.add(passenger)
        return passenger
