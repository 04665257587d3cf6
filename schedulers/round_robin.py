"""
Round Robin 스케줄링 알고리즘 구현
- 선점형: 타임 퀀텀 만료 시 Ready 큐 끝으로 복귀
- CPU 버스트 사이의 I/O 대기 및 문맥교환 오버헤드 반영
"""

from typing import List, Optional
from core.process import Process, InvalidWorkloadError
from core.scheduler_base import (BaseScheduler, IntervalKind, SimulationResult,
                                 CONTEXT_SWITCH_OVERHEAD)

# 타임 퀀텀 기본값
DEFAULT_TIME_QUANTUM = 4


class RoundRobinScheduler(BaseScheduler):
    """
    Round Robin 스케줄러
    각 프로세스에게 동일한 타임 슬라이스를 할당하고 순환 실행
    """

    def __init__(self, processes: List[Process], time_slice: int = DEFAULT_TIME_QUANTUM,
                 context_switch_overhead: int = CONTEXT_SWITCH_OVERHEAD):
        if isinstance(time_slice, bool) or not isinstance(time_slice, int) or time_slice <= 0:
            raise InvalidWorkloadError(f"타임 퀀텀은 양의 정수여야 합니다: {time_slice!r}")
        super().__init__(processes, f"Round Robin (q={time_slice})", context_switch_overhead)
        self.time_slice = time_slice

    def select_next_process(self) -> Optional[Process]:
        """Ready 큐의 첫 번째 프로세스 선택 (FIFO)"""
        if not self.ready_queue:
            return None
        return self.ready_queue.popleft()

    def run(self, verbose: bool = False) -> SimulationResult:
        """Round Robin 스케줄링 실행"""
        if self._finished:
            raise RuntimeError("스케줄러는 한 번만 실행할 수 있습니다. 새 인스턴스를 생성하세요.")
        self._finished = True

        self.log_event(f"===== {self.name} Scheduling Started =====")

        while self.has_remaining_work():
            # 1. 프로세스 도착 및 I/O 완료 처리
            self.handle_pending_events()

            # 2. CPU 유휴: 다음 이벤트 시각으로 이동
            process = self.select_next_process()
            if process is None:
                self.idle_until_next_event()
                continue

            # 3. 디스패치
            process.dispatch(self.current_time)
            self.running_process = process
            self.log_event(f"P{process.pid} → Running")

            # 4. 실행
            run_for = min(process.remaining_burst_time, self.time_slice)
            execution_start = self.current_time
            burst_completed = process.execute(run_for)
            self.current_time += run_for
            self.stats.cpu_busy_time += run_for
            self.add_to_gantt_chart(IntervalKind.EXECUTION, execution_start,
                                    self.current_time, process.pid)
            self.running_process = None

            # 5. 문맥교환: 이후에 실행할 작업이 남아있을 때만
            finishing = burst_completed and not process.has_next_burst()
            others_left = len(self.terminated_processes) + 1 < len(self.processes)
            if not finishing or others_left:
                before = self.current_time
                self.context_switch()
                process.switch_time += self.current_time - before

            # 6. 버스트 완료 확인
            if burst_completed:
                if process.has_next_burst():
                    self.start_io_operation(process)
                else:
                    self.terminate_process(process)
            else:
                # 타이머 인터럽트: Ready 큐 끝으로 복귀
                self.log_event(f"P{process.pid} time slice expired → Ready Queue")
                process.admit(self.current_time)
                self.ready_queue.append(process)

        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if verbose:
            for log in self.event_log:
                print(log)

        return self.get_results()


def simulate(processes: List[Process], time_quantum: int = DEFAULT_TIME_QUANTUM,
             context_switch_overhead: int = CONTEXT_SWITCH_OVERHEAD,
             verbose: bool = False) -> SimulationResult:
    """Round Robin 시뮬레이션을 한 번 실행하고 결과 반환"""
    scheduler = RoundRobinScheduler(processes, time_slice=time_quantum,
                                    context_switch_overhead=context_switch_overhead)
    return scheduler.run(verbose=verbose)
