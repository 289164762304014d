"""Round-trip a Rectangle and a plain class through JSON."""

from ladrillo import Rectangle, from_json, to_json


class Circle:
    def area(self) -> float:
        return 3.14159 * self.radius**2


r = Rectangle(10, 20)
text = to_json(r)
print(text, "area =", from_json(Rectangle, text).area())

c = from_json(Circle, '{"radius": 10}')
print("circle area =", c.area())
