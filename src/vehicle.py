# --------- Constants ---------
VEHICLE_TYPES = ["Bus", "Taxi", "Metro", "Motorcycle"]


class Vehicle:
    """Transport vehicle record (id, type, capacity)"""

    def __init__(self, vehicle_id, vehicle_type, capacity=0):
        """Initialize vehicle attributes"""
        if vehicle_type not in VEHICLE_TYPES:
            raise ValueError(f"Unknown vehicle type: {vehicle_type!r}")
        self.id = vehicle_id        # Plate or fleet number, text or number
        self.type = vehicle_type    # One of VEHICLE_TYPES
        self.capacity = capacity    # Number of seats

    def __repr__(self):
        return f"Vehicle(id={self.id!r}, type={self.type!r}, capacity={self.capacity})"

    def get_info(self):
        """Return vehicle data as dictionary"""
        return {
            'id': self.id,
            'type': self.type,
            'capacity': self.capacity
        }

    def info(self):
        """Print and return a one-line vehicle summary"""
        summary = f"Vehicle: [{self.id}] - Type: {self.type}, Capacity: {self.capacity}"
        print(summary)
        return summary
