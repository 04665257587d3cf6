import pytest

from core.process import Process, ProcessState, InvalidWorkloadError, create_process_copy


def test_new_process_initial_state():
    p = Process(3, 5, [4, 6], [2])
    assert p.state == ProcessState.NEW
    assert p.cpu_bursts == (4, 6)
    assert p.io_waits == (2,)
    assert p.remaining_burst_time == 4
    assert p.start_time is None
    assert p.finish_time is None
    assert p.get_total_burst_time() == 10
    assert p.get_total_io_time() == 2


def test_io_waits_default_to_empty():
    p = Process(1, 0, [7])
    assert p.io_waits == ()
    assert not p.has_next_burst()


@pytest.mark.parametrize('cpu_bursts,io_waits', [
    ([], []),
    ([5], [1]),
    ([5, 5], []),
    ([5, 5], [1, 1]),
    ([0], []),
    ([5, -1], [2]),
    ([5, 5], [-1]),
    ([5.5], []),
    ([True], []),
])
def test_invalid_workload_rejected(cpu_bursts, io_waits):
    with pytest.raises(InvalidWorkloadError):
        Process(1, 0, cpu_bursts, io_waits)


def test_negative_arrival_rejected():
    with pytest.raises(InvalidWorkloadError):
        Process(1, -1, [5])


def test_invalid_workload_is_value_error():
    with pytest.raises(ValueError):
        Process(1, 0, [5], [1, 2])


def test_from_execution_pattern():
    p = Process.from_execution_pattern(2, 1, [5, 3, 4, 0, 2])
    assert p.cpu_bursts == (5, 4, 2)
    assert p.io_waits == (3, 0)
    assert p.execution_pattern == [5, 3, 4, 0, 2]


def test_execution_pattern_must_end_with_cpu_burst():
    with pytest.raises(InvalidWorkloadError):
        Process.from_execution_pattern(1, 0, [5, 3])


def test_burst_lifecycle():
    p = Process(1, 0, [3, 2], [4])
    p.admit(0)
    p.dispatch(0)
    assert p.state == ProcessState.RUNNING
    assert p.start_time == 0
    assert not p.execute(2)
    assert p.execute(1)

    assert p.start_io(3) == 7
    assert p.state == ProcessState.WAITING
    assert p.current_burst_index == 1

    p.complete_io(7)
    assert p.state == ProcessState.READY
    assert p.remaining_burst_time == 2

    p.dispatch(9)
    assert p.ready_time == 2
    assert p.start_time == 0
    assert p.execute(2)
    p.terminate(11)
    assert p.is_completed()
    assert p.finish_time == 11


def test_dispatch_requires_ready_state():
    p = Process(1, 0, [3])
    with pytest.raises(ValueError):
        p.dispatch(0)


def test_copy_is_independent():
    p = Process(1, 0, [3])
    copy = create_process_copy(p)
    copy.admit(0)
    assert p.state == ProcessState.NEW
