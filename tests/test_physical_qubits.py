# tests/test_physical_qubits.py
from src.FaultLogic import Pauli, PhysicalQubit

def test_apply_sequence():
    q = PhysicalQubit()
    assert q.current_error == Pauli.I
    q.apply_pauli('X'); assert q.current_error == Pauli.X
    q.apply_pauli('Z'); assert q.current_error == Pauli.Y
    q.apply_pauli(Pauli.X); assert q.current_error == Pauli.Z
    q.apply_pauli(Pauli.Z); assert q.current_error == Pauli.I

def test_conjugate_h_swaps_frame():
    q = PhysicalQubit()
    q.apply_pauli('X')
    assert q.conjugate_h() == Pauli.Z
    assert q.has_error()
    q.reset_error()
    assert not q.has_error()

def test_history():
    q = PhysicalQubit(keep_history=True)
    q.apply_pauli('X'); q.apply_pauli('Z')
    assert q.history[-1] == Pauli.Y
    assert q.history == [Pauli.X, Pauli.Y]

def test_handles_compare_by_identity():
    a, b = PhysicalQubit(label="a"), PhysicalQubit(label="a")
    assert a != b
    assert a == a
    assert str(a) == "a"
