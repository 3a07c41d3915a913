from ordercontainer.container import MyContainer
from ordercontainer.demo import format_container, main


def test_format_container_orders_match_container():
    c = MyContainer([9, 5, 7, 3, 1])
    lines = format_container(c, "Int").split("\n")
    assert lines[3].split() == [str(v) for v in c.ascending_order()]
    assert lines[5].split() == [str(v) for v in c.descending_order()]
    assert lines[7].split() == [str(v) for v in c.sidecross_order()]
    assert lines[9].split() == ["7", "5", "3", "9", "1"]


def test_format_empty_container():
    lines = format_container(MyContainer(), "E").split("\n")
    assert lines[1] == ""
    assert lines[9] == ""


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Integer container: 9, 5, 7, 3, 1, 104, \n" in out
    assert "Char container: d, a, c, b, \n" in out
    assert "String container: banana, apple, kiwi, pear, \n" in out
    assert "Size_t container: 50, 10, 30, 20, \n" in out
    assert "Animal (MiddleOut): " in out


def test_main_animals_ascending_by_age(capsys):
    main([])
    lines = capsys.readouterr().out.split("\n")
    idx = lines.index("Animal (Ascending): ")
    names = [part for part in lines[idx + 1].split() if part.endswith(".")]
    assert names == ["Bird.", "Dog.", "Cat.", "Horse."]