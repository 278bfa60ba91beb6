from argwise import VARIABLE, ArgumentParser, ValueKind
from argwise.utils import setup_logging

setup_logging()

parser = ArgumentParser(description="Sum some numbers and print the result.")
parser.add_option(["-v", "--verbose"], "verbose", help="Print every step.")
parser.add_option(["-s", "--scale"], "scale", ValueKind.FLOAT, 1, "Multiply the sum.")
parser.add_argument("label", ValueKind.STRING, help="Label printed before the result.")
parser.add_argument("numbers", ValueKind.INTEGER, VARIABLE, "Numbers to add up.")

# Entry point
if __name__ == "__main__":
    parser.parse()
    numbers = parser.getall("numbers")
    if parser.get("verbose", default=False):
        print(" + ".join(str(number) for number in numbers))
    print(f"{parser.get('label')}: {sum(numbers) * parser.get('scale', default=1.0)}")
