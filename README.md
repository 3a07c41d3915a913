# ordercontainer

`ordercontainer` provides `MyContainer`, a container that holds values in the
order they were added and can hand them back in several orders:

| Method               | Order                                                           |
|----------------------|-----------------------------------------------------------------|
| `iter(container)`    | insertion order                                                 |
| `reverse_order()`    | last added first                                                |
| `ascending_order()`  | smallest to largest                                             |
| `descending_order()` | largest to smallest                                             |
| `sidecross_order()`  | smallest, largest, second smallest, second largest, ...         |
| `middle_order()`     | the middle element of insertion order, then alternately the one to its left and the one to its right, working outwards |

For `middle_order()` the middle of an even number of values is the left one of
the two central positions. The ordering is by insertion position, not by value.

Each of these methods returns an iterator over a snapshot taken when it is
called, so adding or removing values afterwards does not disturb a walk already
in progress.

## Installation

```
pip install .
```

## Usage

```python
from ordercontainer.container import MyContainer

c = MyContainer([9, 5, 7, 3, 1])
list(c.middle_order())         # [7, 5, 3, 9, 1]
c.add(4)
len(c)                         # 6
list(c.ascending_order())      # [1, 3, 4, 5, 7, 9]
list(c.descending_order())     # [9, 7, 5, 4, 3, 1]
list(c.sidecross_order())      # [1, 9, 3, 7, 4, 5]
c.remove(4)                    # removes every 4
print(c)                       # 9, 5, 7, 3, 1,
```

`remove()` deletes every occurrence of the value and raises `ValueError` if
the value is not present at all. `str()` of a container lists each value
followed by `", "`.

Any values that compare with `<` can be stored.

### Animal

`ordercontainer.animal.Animal` is an example element type with read-only
`age` and `name` properties. A negative age raises `ValueError`.

```python
from ordercontainer.animal import Animal
from ordercontainer.container import MyContainer

zoo = MyContainer([Animal(5, "Cat"), Animal(3, "Dog")])
[a.name for a in zoo.ascending_order()]   # ['Dog', 'Cat']
str(Animal(5, "Cat"))                     # 'Name: Cat. Age: 5'
```

`<`, `<=`, `>` and `>=` compare ages only. `==` is true when both age and
name match. Note that `!=` applies that very same test, so it is also true
exactly when age and name match.

## Demo

A short demonstration prints containers of integers, characters, strings,
sizes and animals in insertion, ascending, descending, side-cross and
middle-out order:

```
ordercontainer-demo
```

The same output is available from `python -m ordercontainer.demo`, and
`ordercontainer.demo.format_container(container, label)` returns that text for
any container.

## Tests

```
pip install .[test]
pytest
```