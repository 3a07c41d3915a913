import pytest

from ordercontainer.animal import Animal
from ordercontainer.container import MyContainer


def test_attributes():
    cat = Animal(5, "Cat")
    assert cat.age == 5
    assert cat.name == "Cat"


def test_str_format():
    assert str(Animal(5, "Cat")) == "Name: Cat. Age: 5"


def test_equality_needs_age_and_name():
    assert Animal(5, "Cat") == Animal(5, "Cat")
    assert not (Animal(5, "Cat") == Animal(5, "Dog"))
    assert not (Animal(5, "Cat") == Animal(4, "Cat"))


def test_not_equal_matches_equality_test():
    assert Animal(5, "Cat") != Animal(5, "Cat")
    assert not (Animal(5, "Cat") != Animal(3, "Dog"))


def test_ordering_by_age():
    young = Animal(2, "Bird")
    old = Animal(7, "Horse")
    assert young < old
    assert young <= old
    assert old > young
    assert old >= young
    assert not (old < young)
    assert Animal(3, "Dog") <= Animal(3, "Cat")
    assert Animal(3, "Dog") >= Animal(3, "Cat")


def test_negative_age_rejected():
    with pytest.raises(ValueError):
        Animal(-1, "Ghost")


def test_animals_sort_in_container():
    c = MyContainer([Animal(5, "Cat"), Animal(3, "Dog"), Animal(2, "Bird")])
    ages = [a.age for a in c.ascending_order()]
    assert ages == sorted(ages)
    assert [a.age for a in c.descending_order()] == sorted(ages, reverse=True)


def test_remove_animal_by_equality():
    c = MyContainer([Animal(5, "Cat"), Animal(3, "Dog")])
    c.remove(Animal(5, "Cat"))
    assert [a.name for a in c] == ["Dog"]
    with pytest.raises(ValueError):
        c.remove(Animal(5, "Cat"))


def test_hash_consistent_with_equality():
    assert hash(Animal(1, "Ant")) == hash(Animal(1, "Ant"))
    assert len({Animal(1, "Ant"), Animal(1, "Ant")}) == 1