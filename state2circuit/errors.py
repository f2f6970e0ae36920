# state2circuit/errors.py


class StateCircuitError(Exception):
    """Base class for errors raised by state2circuit."""


class InvalidQubitCountError(StateCircuitError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__("Enter a valid number of qubits (between 1 and 5).")


class SynthesisError(StateCircuitError):
    """The remote gate-synthesis service could not be reached or decoded."""


class ConversionInProgressError(StateCircuitError):
    def __init__(self):
        super().__init__("A conversion is already in progress.")
