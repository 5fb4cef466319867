from extendthis import PropertyOverrideError, extend


class Pet:
    def __init__(self, name, color):
        self._name = name
        self._color = color

    def name(self):
        return self._name

    def color(self):
        return self._color


class Walker:
    def walk(self):
        return f"{self.name()} is walking"


class Dog:
    """Composed from Pet (data and accessors) and Walker (behaviour)."""

    def __init__(self, name):
        # Run Pet's initializer and keep the attributes it sets
        extend(self).with_call(Pet, name, "brown")


extend(Dog).with_(Pet).with_(Walker, {"walk": "stroll"})


class Leash:
    def __init__(self):
        self.length = 2
        self._clips = 1

    def attach(self):
        return f"leash of {self.length}m attached"


if __name__ == "__main__":
    dog = Dog("ralph")
    print(dog.name(), dog.color())
    print(dog.stroll())

    # Delegation: public members only, functions still run against the leash
    extend(dog).with_delegate(Leash())
    print(dog.attach(), dog.length, hasattr(dog, "_clips"))

    try:
        extend(dog).with_({"length": 5})
    except PropertyOverrideError as error:
        print(error)

    # Explicitly allowed override
    extend(dog).with_({"length": 5}, "#length")
    print(dog.length)
