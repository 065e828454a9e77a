from utils import format_money


class Person:
    """Anything with a name"""

    def __init__(self, name=""):
        self.name = name


class Worker:
    """Anything that earns a salary"""

    def __init__(self, salary=0):
        self.salary = salary


class Driver(Person, Worker):
    """Driver record: a named, salaried person holding a license"""

    def __init__(self, name="", salary=0, license=""):
        Person.__init__(self, name)
        Worker.__init__(self, salary)
        self.license = license

    def __repr__(self):
        return f"Driver(name={self.name!r}, salary={self.salary}, license={self.license!r})"

    def get_info(self):
        """Return driver data as dictionary"""
        return {
            'name': self.name,
            'salary': self.salary,
            'license': self.license
        }

    def display(self):
        """Print driver info with formatted borders."""
        border = "\n/// " + "=" * 50 + " ///"
        print(f"{border}\nDriver: {self.name}\tSalary: {format_money(self.salary)}\nLicense: {self.license}{border}\n")
