"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


def is_affirmative(response: str) -> bool:
    """A response is a yes when its first non-blank character is y or Y."""
    response = response.strip()
    return bool(response) and response[0] in ("y", "Y")


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    def ask_yes_no(self, prompt: str) -> bool:
        """
        Ask a yes/no question. Anything that is not recognised as a yes counts
        as a no; there is no retry.
        """
        return is_affirmative(self.input(prompt))

    @abstractmethod
    def check_numeric_response(self, ctx: str) -> int:
        """Check if a response is numeric and return the integer value."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Every yes/no question is answered with a no, so players always stand.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def check_numeric_response(self, ctx: str) -> int:
        """Always returns 1 for simulation."""
        return 1


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    answers prompts from scripted queues.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted input.

    def add_decision(self, name, *answers):
        Queue yes/no answers for the participant with the given name.

    def ask_yes_no(self, prompt):
        Pop the next answer for whoever the prompt addresses.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = []
        self.numeric_responses = []
        self.decisions = {}

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_decision(self, name: str, *answers: bool) -> None:
        """Queue hit (True) or stand (False) answers for a named participant."""
        self.decisions.setdefault(name, []).extend(answers)

    def ask_yes_no(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        for name, answers in self.decisions.items():
            if prompt.startswith(f"{name},") and answers:
                return answers.pop(0)
        if self.input_responses:
            return is_affirmative(self.input_responses.pop(0))
        return False

    def check_numeric_response(self, ctx: str) -> int:
        self.prompts.append(ctx)
        if self.numeric_responses:
            return self.numeric_responses.pop(0)
        return 1


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Get input from the console.

    def check_numeric_response(self, ctx):
        Check if a response is numeric.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def check_numeric_response(self, ctx: str) -> int:
        while True:
            response = input(ctx)
            try:
                return int(response)
            except ValueError:
                print("Invalid response, please enter a number.")


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Prompts are recorded in the file and answered with a no, so a logged game
    plays itself out with every player standing.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    def check_numeric_response(self, ctx: str) -> int:
        """Always returns 1 for logging interface."""
        self.output(f"[NUMERIC PROMPT] {ctx}")
        return 1

