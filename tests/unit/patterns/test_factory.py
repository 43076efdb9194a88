import pytest

from design_patterns.creational.factory import Product, ProductFactory, new_person
from design_patterns.domain.core.exceptions import ResourceNotFoundError, ValidationError


class Robot(Product):
    def __init__(self, model: str = "R2"):
        self.model = model

    def say_hi(self) -> None:
        print(f"Beep from {self.model}")


@pytest.fixture
def robot_kind():
    ProductFactory.register("robot", Robot, aliases=["droid"])
    yield "robot"
    ProductFactory.unregister("robot")


def test_new_person_returns_product():
    person = new_person("Pessoa 1")

    assert isinstance(person, Product)


def test_say_hi_prints_once_per_call(capsys):
    person = new_person("Pessoa 1")

    person.say_hi()
    assert capsys.readouterr().out == "Hi\n"

    person.say_hi()
    person.say_hi()
    assert capsys.readouterr().out == "Hi\nHi\n"


def test_name_does_not_change_greeting(capsys):
    new_person("Pessoa 1").say_hi()
    new_person("Pessoa 2").say_hi()

    assert capsys.readouterr().out == "Hi\nHi\n"


def test_product_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Product()


def test_factory_creates_person_by_kind_and_alias(capsys):
    by_kind = ProductFactory.create("person", name="Pessoa 1")
    by_alias = ProductFactory.create("pessoa", name="Pessoa 2")

    by_kind.say_hi()
    by_alias.say_hi()

    assert isinstance(by_kind, Product)
    assert isinstance(by_alias, Product)
    assert capsys.readouterr().out == "Hi\nHi\n"


def test_factory_registers_new_kinds(robot_kind, capsys):
    robot = ProductFactory.create("droid", model="C3")
    robot.say_hi()

    assert robot_kind in ProductFactory.list_products()
    assert capsys.readouterr().out == "Beep from C3\n"


def test_unregister_removes_aliases(robot_kind):
    ProductFactory.unregister(robot_kind)

    with pytest.raises(ResourceNotFoundError):
        ProductFactory.create("droid")


def test_unknown_kind_raises():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        ProductFactory.create("spaceship")

    assert exc_info.value.resource_type == "Product kind"
    assert exc_info.value.resource_id == "spaceship"


def test_register_rejects_non_callable():
    with pytest.raises(ValidationError):
        ProductFactory.register("broken", "not a constructor")

    assert "broken" not in ProductFactory.list_products()


def test_alias_cannot_take_over_a_registered_kind(capsys):
    with pytest.raises(ValidationError):
        ProductFactory.register("robot", Robot, aliases=["person"])

    assert "robot" not in ProductFactory.list_products()
    ProductFactory.create("person", name="x").say_hi()
    assert capsys.readouterr().out == "Hi\n"


def test_alias_cannot_be_shared_between_kinds(robot_kind):
    with pytest.raises(ValidationError):
        ProductFactory.register("android", Robot, aliases=["droid"])

    assert isinstance(ProductFactory.create("droid"), Robot)


def test_kind_cannot_reuse_an_alias(robot_kind):
    with pytest.raises(ValidationError):
        ProductFactory.register("droid", Robot)


def test_reregistering_replaces_aliases(robot_kind):
    ProductFactory.register(robot_kind, Robot, aliases=["bot"])

    assert isinstance(ProductFactory.create("bot"), Robot)
    with pytest.raises(ResourceNotFoundError):
        ProductFactory.create("droid")


def test_register_rejects_class_that_is_not_a_product():
    class Toaster:
        pass

    with pytest.raises(ValidationError):
        ProductFactory.register("toaster", Toaster)

    assert "toaster" not in ProductFactory.list_products()


def test_create_rejects_constructor_returning_non_product():
    ProductFactory.register("broken", lambda: "not a product")
    try:
        with pytest.raises(ValidationError):
            ProductFactory.create("broken")
    finally:
        ProductFactory.unregister("broken")
