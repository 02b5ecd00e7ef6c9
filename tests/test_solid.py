import pytest

from dsakit.patterns.solid import (
    AndSpec,
    Color,
    ColorSpec,
    Journal,
    PersistenceManager,
    Person,
    Product,
    ProductFilter,
    Relationship,
    RelationshipBrowser,
    Relationships,
    Size,
    SizeSpec,
    Specification,
    research,
)


@pytest.fixture
def family():
    relationships = Relationships()
    parent = Person("John")
    relationships.add_parent_and_child(parent, Person("Chris"))
    relationships.add_parent_and_child(parent, Person("Matt"))
    return relationships


def test_find_children(family):
    assert [p.name for p in family.find_all_children_of("John")] == ["Chris", "Matt"]
    assert family.find_all_children_of("Chris") == []


def test_relations_stored_both_ways(family):
    assert len(family.relations) == 2 * 2
    assert (Person("Chris"), Relationship.CHILD, Person("John")) in family.relations


def test_research(family):
    assert research(family) == [
        "John has a child called Chris",
        "John has a child called Matt",
    ]


def test_browser_is_abstract():
    with pytest.raises(TypeError):
        RelationshipBrowser()


@pytest.fixture
def products():
    return [
        Product("Apple", Color.GREEN, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    ]


def test_filter_combined_spec(products):
    spec = ColorSpec(Color.GREEN) & SizeSpec(Size.LARGE)
    assert isinstance(spec, AndSpec)
    assert [p.name for p in ProductFilter().filter(products, spec)] == ["Tree"]


def test_filter_single_specs(products):
    pf = ProductFilter()
    assert [p.name for p in pf.filter(products, ColorSpec(Color.GREEN))] == ["Apple", "Tree"]
    assert [p.name for p in pf.filter(products, SizeSpec(Size.LARGE))] == ["Tree", "House"]
    assert pf.filter(products, ColorSpec(Color.RED)) == []


def test_specification_is_abstract():
    with pytest.raises(TypeError):
        Specification()


def test_journal_numbering_is_consecutive():
    journal = Journal("My Diary")
    journal.add_entry("I ate Bananas")
    other = Journal("Other")
    other.add_entry("I went for Shopping")
    first_number, first_text = journal.entries[0].split(": ", 1)
    second_number, second_text = other.entries[0].split(": ", 1)
    assert first_text == "I ate Bananas"
    assert second_text == "I went for Shopping"
    assert int(second_number) == int(first_number) + 1


def test_entries_is_a_copy():
    journal = Journal("x")
    journal.add_entry("one")
    journal.entries.append("junk")
    assert len(journal.entries) == 1


def test_persistence_writes_lines(tmp_path):
    journal = Journal("My Diary")
    journal.add_entry("I ate Bananas")
    journal.add_entry("I went for Shopping")
    path = tmp_path / "file.txt"
    PersistenceManager.save(journal, path)
    assert path.read_text().splitlines() == journal.entries