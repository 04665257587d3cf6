"""
프로세스 및 PCB (Process Control Block) 관리 모듈
"""

from enum import Enum
from typing import List, Optional, Sequence
from copy import deepcopy


class InvalidWorkloadError(ValueError):
    """시뮬레이션 시작 전에 거부되는 잘못된 작업 부하 정의"""


class ProcessState(Enum):
    """프로세스 상태"""
    NEW = "Not Arrived"
    READY = "Ready"
    RUNNING = "Running"
    WAITING = "Waiting"  # I/O 대기 (blocked)
    TERMINATED = "Terminated"


def _require_int(value, name: str, minimum: int) -> int:
    """정수 검증 (bool 제외)"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWorkloadError(f"{name}은(는) 정수여야 합니다: {value!r}")
    if value < minimum:
        raise InvalidWorkloadError(f"{name}은(는) {minimum} 이상이어야 합니다: {value}")
    return value


class Process:
    """
    프로세스 제어 블록 (PCB)
    정적 작업 부하(도착 시간, CPU 버스트, I/O 대기)와 실행 상태를 관리
    """

    def __init__(self, pid: int, arrival_time: int, cpu_bursts: Sequence[int],
                 io_waits: Optional[Sequence[int]] = None):
        """
        프로세스 초기화

        Args:
            pid: 프로세스 ID
            arrival_time: 도착 시간
            cpu_bursts: CPU 버스트 길이 목록 (1개 이상, 모두 양수)
            io_waits: CPU 버스트 사이의 I/O 대기 길이 (len(cpu_bursts) - 1개)

        Raises:
            InvalidWorkloadError: 정의가 잘못된 경우
        """
        io_waits = [] if io_waits is None else io_waits

        self.pid = _require_int(pid, "PID", 0)
        self.arrival_time = _require_int(arrival_time, "도착 시간", 0)

        if isinstance(cpu_bursts, (str, bytes)) or not isinstance(cpu_bursts, Sequence):
            raise InvalidWorkloadError(f"P{pid}: CPU 버스트는 리스트여야 합니다")
        if isinstance(io_waits, (str, bytes)) or not isinstance(io_waits, Sequence):
            raise InvalidWorkloadError(f"P{pid}: I/O 대기는 리스트여야 합니다")
        if len(cpu_bursts) == 0:
            raise InvalidWorkloadError(f"P{pid}: CPU 버스트가 비어있습니다")
        if len(io_waits) != len(cpu_bursts) - 1:
            raise InvalidWorkloadError(
                f"P{pid}: I/O 대기는 {len(cpu_bursts) - 1}개여야 하지만 {len(io_waits)}개입니다")

        self.cpu_bursts = tuple(_require_int(b, f"P{pid} CPU 버스트", 1) for b in cpu_bursts)
        self.io_waits = tuple(_require_int(w, f"P{pid} I/O 대기", 0) for w in io_waits)

        # 실행 상태 추적
        self.state = ProcessState.NEW
        self.current_burst_index = 0  # 현재 처리 중인 CPU 버스트 인덱스
        self.remaining_burst_time = self.cpu_bursts[0]
        self.blocked_until: Optional[int] = None  # I/O 완료 시각 (WAITING 상태에서만)

        # 통계 정보
        self.start_time: Optional[int] = None  # 첫 실행 시간
        self.finish_time: Optional[int] = None  # 완료 시간
        self.ready_time = 0  # Ready 큐에서 보낸 누적 시간
        self.switch_time = 0  # 자신의 실행 직후 부과된 문맥교환 시간
        self.last_ready_time: Optional[int] = None  # 마지막으로 Ready 상태가 된 시간
        self.waiting_time = 0  # 대기 시간
        self.turnaround_time = 0  # 반환 시간
        self.response_time: Optional[int] = None  # 응답 시간

    @classmethod
    def from_execution_pattern(cls, pid: int, arrival_time: int,
                               execution_pattern: List[int]) -> 'Process':
        """
        실행 패턴 [CPU_burst1, IO_burst1, CPU_burst2, ...] 으로부터 프로세스 생성

        패턴은 CPU 버스트로 시작하고 끝나야 하므로 길이는 홀수여야 함
        """
        if len(execution_pattern) % 2 == 0:
            raise InvalidWorkloadError(
                f"P{pid}: 실행 패턴은 CPU 버스트로 시작하고 끝나야 합니다: {execution_pattern}")
        return cls(pid, arrival_time, execution_pattern[0::2], execution_pattern[1::2])

    @property
    def execution_pattern(self) -> List[int]:
        """CPU/I/O 교차 실행 패턴"""
        pattern = []
        for i, burst in enumerate(self.cpu_bursts):
            pattern.append(burst)
            if i < len(self.io_waits):
                pattern.append(self.io_waits[i])
        return pattern

    def get_total_burst_time(self) -> int:
        """총 CPU 버스트 시간 계산 (I/O 제외)"""
        return sum(self.cpu_bursts)

    def get_total_io_time(self) -> int:
        """총 I/O 대기 시간"""
        return sum(self.io_waits)

    def has_next_burst(self) -> bool:
        return self.current_burst_index + 1 < len(self.cpu_bursts)

    def admit(self, current_time: int):
        """Ready 큐 진입 (도착 또는 I/O 완료)"""
        self.state = ProcessState.READY
        self.blocked_until = None
        self.last_ready_time = current_time

    def dispatch(self, current_time: int):
        """CPU 할당"""
        if self.state != ProcessState.READY:
            raise ValueError(f"Ready 상태가 아닌 P{self.pid}에 CPU를 할당할 수 없습니다")
        self.ready_time += current_time - self.last_ready_time
        self.state = ProcessState.RUNNING
        if self.start_time is None:
            self.start_time = current_time
            self.response_time = current_time - self.arrival_time

    def execute(self, time_units: int) -> bool:
        """
        프로세스 실행 (CPU 버스트 시간 감소)

        Args:
            time_units: 실행할 시간 단위

        Returns:
            버스트가 완료되었는지 여부
        """
        if self.state != ProcessState.RUNNING:
            raise ValueError("Running 상태가 아닌 프로세스는 실행할 수 없습니다.")

        self.remaining_burst_time -= time_units
        assert self.remaining_burst_time >= 0, "remaining burst time went negative"
        return self.remaining_burst_time == 0

    def start_io(self, current_time: int) -> int:
        """
        현재 버스트를 마치고 다음 I/O 대기 시작

        Returns:
            I/O 완료 시각
        """
        io_duration = self.io_waits[self.current_burst_index]
        self.current_burst_index += 1
        self.state = ProcessState.WAITING
        self.blocked_until = current_time + io_duration
        return self.blocked_until

    def complete_io(self, current_time: int):
        """I/O 완료: 다음 CPU 버스트 길이로 재설정하고 Ready 상태로"""
        self.remaining_burst_time = self.cpu_bursts[self.current_burst_index]
        self.admit(current_time)

    def terminate(self, current_time: int):
        """마지막 버스트 완료"""
        self.state = ProcessState.TERMINATED
        self.finish_time = current_time
        self.remaining_burst_time = 0

    def is_completed(self) -> bool:
        """프로세스가 완료되었는지 확인"""
        return self.state == ProcessState.TERMINATED

    def __repr__(self):
        return f"P{self.pid}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.pid}: State={self.state.value}, " \
               f"Burst={self.current_burst_index + 1}/{len(self.cpu_bursts)}, " \
               f"Remaining={self.remaining_burst_time}"


def create_process_copy(process: Process) -> Process:
    """
    프로세스의 깊은 복사본 생성
    각 시뮬레이션이 호출자의 프로세스를 변경하지 않도록 하기 위함
    """
    return deepcopy(process)
