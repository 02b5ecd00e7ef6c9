import pytest

from dsakit.patterns.composite import Circle, Creature, GraphicObject, Group, Neuron, NeuronLayer


def test_creature_equal_abilities():
    creature = Creature(strength=4, agility=4, intelligence=4)
    assert creature.average() == 4.0
    assert creature.max() == 4


def test_creature_sum_and_max():
    creature = Creature(strength=10, agility=2, intelligence=7)
    assert creature.sum() == 19
    assert creature.max() == 10
    assert creature.average() == creature.sum() / 3


def test_graphic_object_is_abstract():
    with pytest.raises(TypeError):
        GraphicObject()


def test_group_draw_nests():
    root = Group("root")
    root.add_object(Circle())
    sub = Group("sub")
    sub.add_object(Circle())
    root.add_object(sub)
    assert root.draw() == ["Group root contains:", "Circle", "Group sub contains:", "Circle"]


def test_neuron_connection_and_text():
    n1, n2 = Neuron(), Neuron()
    n1.connect_to(n2)
    assert n1.outputs == [n2]
    assert n2.inputs == [n1]
    assert str(n1) == f"[{n1.id}]\t-->\t{n2.id}\n"
    assert str(n2) == f"{n1.id}\t-->\t[{n2.id}]\n"


def test_neuron_ids_are_unique_and_increasing():
    first, second = Neuron(), Neuron()
    assert second.id > first.id


def test_layer_to_neuron():
    layer = NeuronLayer(5)
    target = Neuron()
    layer.connect_to(target)
    assert len(layer) == 5
    assert target.inputs == list(layer)
    assert all(neuron.outputs == [target] for neuron in layer)


def test_layer_to_layer():
    l2, l3 = NeuronLayer(2), NeuronLayer(3)
    l2.connect_to(l3)
    assert all(len(neuron.outputs) == len(l3) for neuron in l2)
    assert all(len(neuron.inputs) == len(l2) for neuron in l3)
    assert str(l3) == "".join(str(neuron) for neuron in l3)