from typing import Protocol


class InputReader(Protocol):
    def read_selection(self) -> int:
        ...

    def read_vehicle_registration_number(self) -> str:
        ...


class RequestInputReader:
    def __init__(self, vehicle_reg_number: str, selection: int = 0):
        self.vehicle_reg_number = vehicle_reg_number
        self.selection = selection

    def read_selection(self) -> int:
        return self.selection

    def read_vehicle_registration_number(self) -> str:
        vehicle_reg_number = self.vehicle_reg_number.strip()
        if not vehicle_reg_number:
            raise ValueError("Invalid input provided")
        return vehicle_reg_number
