"""
시각화 모듈: Gantt Chart 및 통계 출력
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from core.scheduler_base import IntervalKind, SimulationResult


class Visualizer:
    """스케줄링 결과 시각화"""

    def __init__(self):
        # 프로세스별 색상 설정
        self.colors = plt.cm.Set3.colors
        self.switch_color = '#FF9999'
        self.idle_color = '#CCCCCC'

    def render_text_gantt(self, result: SimulationResult, width: int = 80) -> str:
        """
        ASCII Gantt Chart 문자열 생성

        각 구간은 길이에 비례한 폭(최소 1칸)으로 그리며
        실행은 P<pid>, 문맥교환은 CS, 유휴는 '.'으로 표시
        """
        if not result.timeline:
            return "(empty timeline)"

        scale = max(1.0, result.total_time / width)
        bar = "|"
        axis = "0"
        for interval in result.timeline:
            cells = max(1, round(interval.duration / scale))
            if interval.kind == IntervalKind.EXECUTION:
                label = f"P{interval.pid}"
                fill = "#"
            elif interval.kind == IntervalKind.CONTEXT_SWITCH:
                label = "CS"
                fill = "~"
            else:
                label = ""
                fill = "."
            cells = max(cells, len(label))
            bar += label.center(cells, fill) + "|"
            axis = axis.ljust(len(bar) - 1) + str(interval.end_time)
        return bar + "\n" + axis

    def draw_gantt_chart(self, result: SimulationResult, save_path: str = None,
                         show: bool = True):
        """
        Gantt Chart 그리기

        Args:
            result: 시뮬레이션 결과
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부
        """
        if not result.timeline:
            print(f"{result.algorithm}에 대한 Gantt 차트 데이터가 없습니다")
            return

        fig, ax = plt.subplots(figsize=(16, 6))

        # 프로세스 ID별 행, 마지막 행은 CPU (문맥교환/유휴)
        unique_pids = [record.pid for record in result.processes]
        pid_to_y = {pid: idx for idx, pid in enumerate(unique_pids)}
        cpu_row = len(unique_pids)

        for entry in result.timeline:
            if entry.kind == IntervalKind.EXECUTION:
                y_pos = pid_to_y[entry.pid]
                color = self.colors[entry.pid % len(self.colors)]
            elif entry.kind == IntervalKind.CONTEXT_SWITCH:
                y_pos = cpu_row
                color = self.switch_color
            else:
                y_pos = cpu_row
                color = self.idle_color

            ax.barh(y_pos, entry.duration, left=entry.start_time, height=0.8,
                    color=color, edgecolor='black', linewidth=0.5)

            if entry.kind == IntervalKind.EXECUTION and entry.duration > 1:
                ax.text(entry.start_time + entry.duration / 2, y_pos, f'P{entry.pid}',
                        ha='center', va='center', fontsize=8, fontweight='bold')

        # 축 설정
        ax.set_yticks(range(cpu_row + 1))
        ax.set_yticklabels([f'P{pid}' for pid in unique_pids] + ['CPU'])
        ax.set_xlabel('Time', fontsize=12)
        ax.set_ylabel('Process', fontsize=12)
        ax.set_title(f'Gantt Chart - {result.algorithm}', fontsize=14, fontweight='bold')
        ax.grid(axis='x', alpha=0.3)

        legend_elements = [
            mpatches.Patch(color=self.colors[0], label='Running'),
            mpatches.Patch(color=self.switch_color, label='Context Switch'),
            mpatches.Patch(color=self.idle_color, label='Idle')
        ]
        ax.legend(handles=legend_elements, loc='upper right')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Gantt 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def format_statistics_table(self, result: SimulationResult) -> str:
        """통계 요약 표 문자열"""
        lines = [
            "="*80,
            f"스케줄링 결과 - {result.algorithm}",
            "="*80,
            f"{'총 시간':<20} {result.total_time:>12}",
            f"{'평균 대기':<20} {result.avg_waiting_time:>12.2f}",
            f"{'평균 반환':<20} {result.avg_turnaround_time:>12.2f}",
            f"{'평균 응답':<20} {result.avg_response_time:>12.2f}",
            f"{'CPU 이용률(%)':<20} {result.cpu_utilization:>12.2f}",
            f"{'문맥교환':<20} {result.context_switches:>12}",
            "="*80,
        ]
        return "\n".join(lines)

    def format_process_details(self, result: SimulationResult) -> str:
        """개별 프로세스 상세 표 문자열"""
        lines = [
            "="*80,
            f"프로세스 상세 - {result.algorithm}",
            "="*80,
            f"{'PID':<6} {'도착':>8} {'CPU':>8} {'I/O':>8} {'시작':>8} {'종료':>8} "
            f"{'대기':>8} {'반환':>8} {'응답':>8}",
            "-"*80,
        ]
        for p in result.processes:
            lines.append(f"{p.pid:<6} {p.arrival_time:>8} {p.burst_time:>8} {p.io_time:>8} "
                         f"{p.start_time:>8} {p.finish_time:>8} {p.waiting_time:>8} "
                         f"{p.turnaround_time:>8} {p.response_time:>8}")
        lines.append("="*80)
        return "\n".join(lines)

    def print_statistics_table(self, result: SimulationResult):
        print("\n" + self.format_statistics_table(result) + "\n")

    def print_process_details(self, result: SimulationResult):
        print("\n" + self.format_process_details(result) + "\n")
