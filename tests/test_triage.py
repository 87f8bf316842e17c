import io

import pytest

from dstoolkit.triage import (
    EmergencyRoom,
    HeapEmptyError,
    MaxHeap,
    Patient,
    load_patients,
    main,
)

VALUES = [5, 3, 9, 1, 7, 9, 2, 8]


def test_extract_in_descending_order():
    heap = MaxHeap()
    for value in VALUES:
        heap.insert(value)
    drained = [heap.extract_max() for _ in range(len(VALUES))]
    assert drained == sorted(VALUES, reverse=True)
    assert len(heap) == 0


def test_peek_is_maximum():
    heap = MaxHeap()
    for value in VALUES:
        heap.insert(value)
    assert heap.peek() == max(VALUES)
    assert len(heap) == len(VALUES)


def test_heap_property_holds():
    heap = MaxHeap()
    for value in VALUES:
        heap.insert(value)
    items = list(heap)
    assert sorted(items) == sorted(VALUES)
    assert all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(HeapEmptyError, match="Heap is empty"):
        heap.extract_max()
    with pytest.raises(HeapEmptyError):
        heap.peek()


def test_heap_str():
    heap = MaxHeap()
    assert str(heap) == "Heap: [  ]"
    heap.insert(4)
    assert str(heap) == "Heap: [ 4 ]"


def test_capacity_grows():
    heap = MaxHeap(2)
    for value in (1, 2, 3):
        heap.insert(value)
    assert heap.capacity == 4
    assert heap.peek() == 3


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MaxHeap(0)


def test_patient_ordering():
    assert Patient("a", 9, 5) > Patient("b", 3, 1)
    assert Patient("a", 4, 1) > Patient("b", 4, 2)
    assert not Patient("a", 4, 2) > Patient("b", 4, 1)
    assert str(Patient("carol", 1, 1)) == "carol"


def test_room_treats_by_priority():
    room = EmergencyRoom()
    room.add_patient("low", 2, 1)
    room.add_patient("high_late", 8, 5)
    room.add_patient("high_early", 8, 3)
    assert room.peek_patient().name == "high_early"
    order = [room.treat_patient().name for _ in range(3)]
    assert order == ["high_early", "high_late", "low"]
    with pytest.raises(HeapEmptyError):
        room.treat_patient()


@pytest.mark.parametrize("name, severity, time", [("", 5, 1), ("a", 0, 1), ("a", 5, 0)])
def test_room_rejects_invalid(name, severity, time):
    room = EmergencyRoom()
    with pytest.raises(ValueError, match="Invalid input"):
        room.add_patient(name, severity, time)
    assert len(room) == 0


def test_queue_text_lists_names():
    room = EmergencyRoom()
    room.add_patient("ann", 3, 1)
    room.add_patient("bob", 6, 2)
    text = room.queue_text()
    assert text.startswith("Heap: [ bob")
    assert "ann" in text


def test_load_patients():
    assert load_patients("a 5 1\nb 3 2\n") == [("a", 5, 1), ("b", 3, 2)]
    assert load_patients("a 5 1\nb x 2\nc 1 1\n") == [("a", 5, 1)]
    assert load_patients("a 5 1\nb 3") == [("a", 5, 1)]


def test_main_sample_data_and_treat(tmp_path, monkeypatch, capsys):
    path = tmp_path / "patients.txt"
    path.write_text("ann 3 1\nbob 9 2\ncy 0 3\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n2\n3\n0\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Treating patient: bob" in out
    assert "Next patient to be treated: ann" in out
    assert "Invalid input" in out
    assert "Exiting program..." in out


def test_main_manual_add(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\ndee 4 2\n4\n0\n"))
    main([])
    out = capsys.readouterr().out
    assert "Patient dee added successfully." in out
    assert "Current queue: Heap: [ dee ]" in out


def test_main_empty_queue_and_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n7\n0\n"))
    main([])
    out = capsys.readouterr().out
    assert out.count("No patients in queue.") == 2
    assert "Invalid choice. Please try again." in out


def test_main_missing_sample_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n0\n"))
    main([str(tmp_path / "patients.txt")])
    assert "Error: Could not open patients.txt" in capsys.readouterr().out