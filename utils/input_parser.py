"""
입력 데이터 파서 및 프로세스 생성 모듈
"""

import csv
import json
import os
import random
from typing import Dict, List
from core.process import Process, InvalidWorkloadError


class InputParser:
    """입력 파일 파서"""

    @staticmethod
    def load(filename: str) -> List[Process]:
        """확장자에 따라 JSON 또는 텍스트 형식으로 로드"""
        if os.path.splitext(filename)[1].lower() == '.json':
            return InputParser.parse_json_file(filename)
        return InputParser.parse_file(filename)

    @staticmethod
    def parse_file(filename: str) -> List[Process]:
        """
        텍스트(CSV) 파일에서 프로세스 정보 읽기

        파일 형식: PID,생성시간,실행패턴
        예: 1,0,"5,3,5"  (CPU 5 → I/O 3 → CPU 5)

        Args:
            filename: 입력 파일 경로

        Returns:
            프로세스 리스트

        Raises:
            InvalidWorkloadError: 잘못된 라인이 있는 경우 (라인 번호 포함)
        """
        processes = []

        with open(filename, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()

                # 주석 및 빈 줄 제거
                if not line or line.startswith('#'):
                    continue

                parts = next(csv.reader([line], skipinitialspace=True))
                try:
                    processes.append(InputParser._create_process_from_parts(parts))
                except InvalidWorkloadError as e:
                    raise InvalidWorkloadError(f"{filename}:{line_no}: {e}") from e

        print(f"{filename}에서 {len(processes)}개의 프로세스를 로드했습니다")
        return processes

    @staticmethod
    def _create_process_from_parts(parts: List[str]) -> Process:
        """파싱된 부분에서 프로세스 객체 생성"""
        if len(parts) != 3:
            raise InvalidWorkloadError(f"잘못된 형식: 3개 필드가 필요하지만 {len(parts)}개입니다")

        try:
            pid = int(parts[0])
            arrival_time = int(parts[1])
            execution_pattern = [int(x) for x in parts[2].split(',') if x.strip()]
        except ValueError as e:
            raise InvalidWorkloadError(f"숫자 필드 변환 오류: {e}") from e

        return Process.from_execution_pattern(pid, arrival_time, execution_pattern)

    @staticmethod
    def parse_json_file(filename: str) -> List[Process]:
        """
        JSON 파일에서 프로세스 정보 읽기

        형식: [{"pid": 0, "arrival": 0, "cpu_bursts": [5, 5], "io_waits": [3]}, ...]
        또는 {"processes": [...]}
        """
        with open(filename, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidWorkloadError(f"{filename}: JSON 파싱 오류: {e}") from e

        if isinstance(data, dict):
            data = data.get('processes')
        if not isinstance(data, list):
            raise InvalidWorkloadError(f"{filename}: 프로세스 목록이 필요합니다")

        processes = InputParser.from_dicts(data)
        print(f"{filename}에서 {len(processes)}개의 프로세스를 로드했습니다")
        return processes

    @staticmethod
    def from_dicts(definitions: List[Dict]) -> List[Process]:
        """
        딕셔너리 목록을 프로세스로 변환

        pid가 없으면 목록 인덱스, io_waits가 없으면 빈 목록을 사용
        도착 시간은 'arrival' 또는 'arrival_time' 키로 받음
        """
        processes = []
        for index, definition in enumerate(definitions):
            if not isinstance(definition, dict):
                raise InvalidWorkloadError(f"프로세스 #{index}: 객체가 필요합니다: {definition!r}")
            arrival = definition.get('arrival', definition.get('arrival_time'))
            if arrival is None or 'cpu_bursts' not in definition:
                raise InvalidWorkloadError(
                    f"프로세스 #{index}: 'arrival'과 'cpu_bursts' 필드가 필요합니다")
            processes.append(Process(
                definition.get('pid', index),
                arrival,
                definition['cpu_bursts'],
                definition.get('io_waits', []),
            ))
        return processes

    @staticmethod
    def generate_random_processes(num_processes: int = 10,
                                  max_arrival: int = 20,
                                  max_burst: int = 30,
                                  max_io: int = 20,
                                  seed: int = None) -> List[Process]:
        """
        랜덤 프로세스 생성

        Args:
            num_processes: 생성할 프로세스 수
            max_arrival: 최대 도착 시간
            max_burst: 최대 CPU 버스트 시간
            max_io: 최대 I/O 시간
            seed: 랜덤 시드

        Returns:
            프로세스 리스트
        """
        rng = random.Random(seed)
        processes = []

        for pid in range(1, num_processes + 1):
            arrival_time = rng.randint(0, max_arrival)

            # 실행 패턴 생성 (CPU-bound 또는 I/O-bound)
            if rng.random() < 0.4:
                # I/O bound: 짧은 CPU 버스트와 긴 I/O 대기
                num_bursts = rng.randint(2, 4)
                cpu_bursts = [rng.randint(1, max(1, max_burst // 3)) for _ in range(num_bursts)]
                io_waits = [rng.randint(min(5, max_io), max_io) for _ in range(num_bursts - 1)]
            else:
                # CPU bound: 긴 CPU 버스트
                num_bursts = rng.randint(1, 3)
                cpu_bursts = [rng.randint(max(1, max_burst // 2), max_burst) for _ in range(num_bursts)]
                io_waits = [rng.randint(0, max_io // 2) for _ in range(num_bursts - 1)]

            processes.append(Process(pid, arrival_time, cpu_bursts, io_waits))

        print(f"{num_processes}개의 랜덤 프로세스를 생성했습니다")
        return processes

    @staticmethod
    def save_processes_to_file(processes: List[Process], filename: str):
        """
        프로세스 리스트를 파일로 저장

        Args:
            processes: 저장할 프로세스 리스트
            filename: 출력 파일 경로
        """
        with open(filename, 'w', encoding='utf-8') as f:
            f.write("# Round Robin Simulator Input Data\n")
            f.write("# Format: PID,ArrivalTime,ExecutionPattern (CPU,IO,CPU,...)\n\n")

            for process in processes:
                pattern_str = ','.join(str(x) for x in process.execution_pattern)
                f.write(f'{process.pid},{process.arrival_time},"{pattern_str}"\n')

        print(f"{len(processes)}개의 프로세스를 {filename}에 저장했습니다")

    @staticmethod
    def print_process_summary(processes: List[Process]):
        """프로세스 요약 정보 출력"""
        print("\n" + "="*80)
        print("프로세스 요약")
        print("="*80)
        print(f"{'PID':<6} {'도착시간':>8} {'버스트 수':>10} {'총 CPU':>10} {'총 I/O':>10}")
        print("-"*80)

        for p in sorted(processes, key=lambda x: x.pid):
            print(f"{p.pid:<6} {p.arrival_time:>8} {len(p.cpu_bursts):>10} "
                  f"{p.get_total_burst_time():>10} {p.get_total_io_time():>10}")

        print("="*80 + "\n")

        # 통계
        cpu_bound = sum(1 for p in processes if len(p.cpu_bursts) == 1)
        print(f"전체 프로세스: {len(processes)}개")
        print(f"  - CPU 중심: {cpu_bound}개")
        print(f"  - I/O 포함: {len(processes) - cpu_bound}개")
        print()
