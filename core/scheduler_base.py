"""
스케줄러 기본 프레임워크, 타임라인(Gantt) 및 결과 관리
"""

import heapq
from collections import deque
from typing import Deque, List, Dict, Optional, Tuple
from dataclasses import dataclass, field, asdict
from enum import Enum
from .process import Process, InvalidWorkloadError, create_process_copy

# 문맥교환 오버헤드 기본값 (시간 단위)
CONTEXT_SWITCH_OVERHEAD = 1

# 같은 시각의 이벤트 처리 순서: I/O 완료가 새 도착보다 먼저
_IO_COMPLETE = 0
_ARRIVAL = 1


class IntervalKind(Enum):
    """타임라인 구간 종류"""
    EXECUTION = "Execution"
    CONTEXT_SWITCH = "Context Switch"
    IDLE = "Idle"


@dataclass(frozen=True)
class TimelineInterval:
    """Gantt Chart 엔트리"""
    kind: IntervalKind
    start_time: int
    end_time: int
    pid: Optional[int] = None  # EXECUTION 구간에서만 설정

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    def to_dict(self) -> Dict:
        return {
            'kind': self.kind.value,
            'pid': self.pid,
            'start_time': self.start_time,
            'end_time': self.end_time,
        }


@dataclass(frozen=True)
class ProcessRecord:
    """완료된 프로세스의 읽기 전용 기록"""
    pid: int
    arrival_time: int
    cpu_bursts: Tuple[int, ...]
    io_waits: Tuple[int, ...]
    start_time: int
    finish_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int

    @classmethod
    def from_process(cls, process: Process) -> 'ProcessRecord':
        return cls(
            pid=process.pid,
            arrival_time=process.arrival_time,
            cpu_bursts=process.cpu_bursts,
            io_waits=process.io_waits,
            start_time=process.start_time,
            finish_time=process.finish_time,
            waiting_time=process.waiting_time,
            turnaround_time=process.turnaround_time,
            response_time=process.response_time,
        )

    @property
    def burst_time(self) -> int:
        return sum(self.cpu_bursts)

    @property
    def io_time(self) -> int:
        return sum(self.io_waits)


@dataclass(frozen=True)
class SimulationResult:
    """시뮬레이션 결과 (반환 후 변경 불가)"""
    algorithm: str
    processes: Tuple[ProcessRecord, ...]
    total_time: int
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    cpu_busy_time: int
    cpu_utilization: float
    context_switches: int
    timeline: Tuple[TimelineInterval, ...]
    event_log: Tuple[str, ...] = field(default=(), compare=False)

    @property
    def statistics(self) -> Dict:
        return {
            'avg_waiting_time': self.avg_waiting_time,
            'avg_turnaround_time': self.avg_turnaround_time,
            'avg_response_time': self.avg_response_time,
            'cpu_utilization': self.cpu_utilization,
            'context_switches': self.context_switches,
            'total_time': self.total_time,
        }

    def get_process(self, pid: int) -> ProcessRecord:
        for record in self.processes:
            if record.pid == pid:
                return record
        raise KeyError(pid)

    def to_dict(self) -> Dict:
        processes = []
        for record in self.processes:
            entry = asdict(record)
            entry['cpu_bursts'] = list(record.cpu_bursts)
            entry['io_waits'] = list(record.io_waits)
            entry['burst_time'] = record.burst_time
            processes.append(entry)
        return {
            'algorithm': self.algorithm,
            'processes': processes,
            'statistics': self.statistics,
            'gantt_chart': [interval.to_dict() for interval in self.timeline],
            'event_log': list(self.event_log),
        }


class SchedulerStats:
    """스케줄링 통계"""

    def __init__(self):
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.total_response_time = 0
        self.context_switches = 0
        self.cpu_busy_time = 0
        self.total_simulation_time = 0
        self.process_count = 0

    def calculate_averages(self):
        """평균 계산"""
        if self.process_count == 0:
            return {
                'avg_waiting_time': 0.0,
                'avg_turnaround_time': 0.0,
                'avg_response_time': 0.0,
                'cpu_utilization': 0.0,
                'context_switches': self.context_switches
            }

        return {
            'avg_waiting_time': self.total_waiting_time / self.process_count,
            'avg_turnaround_time': self.total_turnaround_time / self.process_count,
            'avg_response_time': self.total_response_time / self.process_count,
            'cpu_utilization': (self.cpu_busy_time / self.total_simulation_time * 100)
                               if self.total_simulation_time > 0 else 0.0,
            'context_switches': self.context_switches
        }


class BaseScheduler:
    """
    기본 스케줄러 클래스
    시뮬레이션 시계, Ready 큐, I/O 대기 집합, 프로세스 테이블을 소유하며
    한 인스턴스는 한 번의 시뮬레이션 실행에 해당함
    """

    def __init__(self, processes: List[Process], name: str = "Base Scheduler",
                 context_switch_overhead: int = CONTEXT_SWITCH_OVERHEAD):
        if isinstance(context_switch_overhead, bool) or not isinstance(context_switch_overhead, int) \
                or context_switch_overhead < 0:
            raise InvalidWorkloadError(
                f"문맥교환 오버헤드는 0 이상의 정수여야 합니다: {context_switch_overhead!r}")
        pids = [p.pid for p in processes]
        if len(pids) != len(set(pids)):
            raise InvalidWorkloadError(f"중복된 PID가 있습니다: {sorted(pids)}")

        # 호출자의 프로세스는 변경하지 않음
        self.processes = [create_process_copy(p) for p in processes]
        self.name = name
        self.context_switch_overhead = context_switch_overhead
        self.current_time = 0
        self.ready_queue: Deque[Process] = deque()
        self.running_process: Optional[Process] = None
        self.terminated_processes: List[Process] = []

        # 아직 도착하지 않은 프로세스 (도착 시간, PID 순)
        self.pending_arrivals: List[Process] = sorted(
            self.processes, key=lambda p: (p.arrival_time, p.pid))
        # I/O 완료 큐 (완료 시각, PID, 프로세스)
        self.io_completion_queue: List[Tuple[int, int, Process]] = []

        # Gantt Chart 데이터
        self.gantt_chart: List[TimelineInterval] = []

        # 통계
        self.stats = SchedulerStats()

        # 이벤트 로그
        self.event_log: List[str] = []

        self._finished = False

    def log_event(self, message: str):
        """이벤트 로그 기록"""
        log_entry = f"[T={self.current_time:3d}] {message}"
        self.event_log.append(log_entry)

    def add_to_gantt_chart(self, kind: IntervalKind, start: int, end: int,
                           pid: Optional[int] = None):
        """Gantt Chart에 엔트리 추가"""
        if start < end:  # 유효한 시간 구간만 추가
            if self.gantt_chart:
                assert self.gantt_chart[-1].end_time == start, "timeline gap"
            self.gantt_chart.append(TimelineInterval(kind, start, end, pid))

    def handle_pending_events(self):
        """
        현재 시각까지 발생한 도착 및 I/O 완료 처리

        (발생 시각, 종류, PID) 순으로 Ready 큐에 추가하며
        같은 시각이면 I/O 완료가 새 도착보다 먼저 들어감
        """
        events = []
        while self.pending_arrivals and self.pending_arrivals[0].arrival_time <= self.current_time:
            process = self.pending_arrivals.pop(0)
            events.append((process.arrival_time, _ARRIVAL, process.pid, process))
        while self.io_completion_queue and self.io_completion_queue[0][0] <= self.current_time:
            io_time, pid, process = heapq.heappop(self.io_completion_queue)
            events.append((io_time, _IO_COMPLETE, pid, process))

        for event_time, event_kind, pid, process in sorted(events, key=lambda e: e[:3]):
            if event_kind == _ARRIVAL:
                process.admit(event_time)
                self.log_event(f"P{pid} arrived → Ready Queue")
            else:
                process.complete_io(event_time)
                self.log_event(f"P{pid} I/O completed → Ready Queue")
            self.ready_queue.append(process)

    def next_event_time(self) -> Optional[int]:
        """다음 도착 또는 I/O 완료 시각"""
        candidates = []
        if self.pending_arrivals:
            candidates.append(self.pending_arrivals[0].arrival_time)
        if self.io_completion_queue:
            candidates.append(self.io_completion_queue[0][0])
        return min(candidates) if candidates else None

    def idle_until_next_event(self):
        """Ready 큐가 비었을 때 다음 이벤트 시각으로 시계를 이동"""
        next_time = self.next_event_time()
        assert next_time is not None, "no runnable process and no pending event"
        assert next_time > self.current_time, "pending event was not admitted"
        self.add_to_gantt_chart(IntervalKind.IDLE, self.current_time, next_time)
        self.log_event(f"CPU idle until T={next_time}")
        self.current_time = next_time

    def start_io_operation(self, process: Process):
        """I/O 작업 시작"""
        io_completion_time = process.start_io(self.current_time)
        heapq.heappush(self.io_completion_queue, (io_completion_time, process.pid, process))
        self.log_event(f"P{process.pid} → I/O (until T={io_completion_time}) → Waiting")

    def has_remaining_work(self) -> bool:
        """완료되지 않은 프로세스가 남아있는지 확인"""
        return len(self.terminated_processes) < len(self.processes)

    def context_switch(self):
        """문맥교환 오버헤드를 타임라인과 시계에 반영"""
        if self.context_switch_overhead <= 0:
            return
        end = self.current_time + self.context_switch_overhead
        self.add_to_gantt_chart(IntervalKind.CONTEXT_SWITCH, self.current_time, end)
        self.stats.context_switches += 1
        self.log_event("Context Switch")
        self.current_time = end

    def terminate_process(self, process: Process):
        """프로세스 종료 처리"""
        process.terminate(self.current_time)
        process.turnaround_time = process.finish_time - process.arrival_time
        # 대기 시간 = 반환 시간 - CPU 시간 - I/O 시간 - 자신에게 부과된 문맥교환 시간
        process.waiting_time = (process.turnaround_time
                                - process.get_total_burst_time()
                                - process.get_total_io_time()
                                - process.switch_time)
        assert process.waiting_time == process.ready_time, \
            f"P{process.pid}: waiting time {process.waiting_time} != ready time {process.ready_time}"
        assert process.waiting_time >= 0, f"P{process.pid}: negative waiting time"

        self.terminated_processes.append(process)
        self.log_event(f"P{process.pid} → Terminated (WT={process.waiting_time}, "
                       f"TT={process.turnaround_time})")

    def update_statistics(self):
        """최종 통계 업데이트"""
        self.stats.total_simulation_time = self.current_time
        self.stats.process_count = len(self.terminated_processes)

        for process in self.terminated_processes:
            self.stats.total_waiting_time += process.waiting_time
            self.stats.total_turnaround_time += process.turnaround_time
            self.stats.total_response_time += process.response_time

    def is_simulation_complete(self) -> bool:
        """시뮬레이션 완료 여부 확인"""
        return not self.has_remaining_work()

    def run(self, verbose: bool = False) -> SimulationResult:
        """
        스케줄링 시뮬레이션 실행 (하위 클래스에서 구현)

        Args:
            verbose: 상세 로그 출력 여부

        Returns:
            시뮬레이션 결과
        """
        raise NotImplementedError("Subclasses must implement run()")

    def get_results(self) -> SimulationResult:
        """
        시뮬레이션 결과 반환

        Returns:
            결과 (통계, Gantt Chart, 로그 등)
        """
        self.update_statistics()
        averages = self.stats.calculate_averages()
        records = tuple(ProcessRecord.from_process(p)
                        for p in sorted(self.terminated_processes, key=lambda p: p.pid))

        return SimulationResult(
            algorithm=self.name,
            processes=records,
            total_time=self.current_time,
            avg_waiting_time=averages['avg_waiting_time'],
            avg_turnaround_time=averages['avg_turnaround_time'],
            avg_response_time=averages['avg_response_time'],
            cpu_busy_time=self.stats.cpu_busy_time,
            cpu_utilization=averages['cpu_utilization'],
            context_switches=self.stats.context_switches,
            timeline=tuple(self.gantt_chart),
            event_log=tuple(self.event_log),
        )
