#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Round Robin 스케줄러 시뮬레이터 - 메인 실행 파일

Usage:
python main.py data/sample_processes.txt -q 4 -s 1
python main.py --random 10 --seed 42
"""

import argparse
import os
import sys

from core.process import InvalidWorkloadError
from core.scheduler_base import CONTEXT_SWITCH_OVERHEAD
from schedulers.round_robin import RoundRobinScheduler, DEFAULT_TIME_QUANTUM
from utils.input_parser import InputParser
from utils.visualization import Visualizer


def print_banner():
    """배너 출력"""
    print("\n" + "="*80)
    print(" "*22 + "Round Robin 스케줄러 시뮬레이터")
    print("="*80 + "\n")


def save_results(result, output_dir="simulation_results", draw_chart=True):
    """결과 저장"""
    os.makedirs(output_dir, exist_ok=True)
    visualizer = Visualizer()

    if draw_chart:
        save_path = os.path.join(output_dir, "gantt_round_robin.png")
        visualizer.draw_gantt_chart(result, save_path=save_path, show=False)

    results_file = os.path.join(output_dir, "results.txt")
    with open(results_file, 'w', encoding='utf-8') as f:
        f.write(visualizer.format_statistics_table(result) + "\n\n")
        f.write(visualizer.format_process_details(result) + "\n\n")
        f.write("Gantt Chart\n")
        f.write(visualizer.render_text_gantt(result) + "\n\n")
        f.write("Event Log\n")
        for log in result.event_log:
            f.write(log + "\n")
    print(f"[완료] 결과가 {results_file}에 저장되었습니다")


def build_arg_parser():
    parser = argparse.ArgumentParser(description='Round Robin CPU 스케줄링 시뮬레이터')
    parser.add_argument('input', nargs='?', help='프로세스 입력 파일 (.txt 또는 .json)')
    parser.add_argument('-q', '--quantum', type=int, default=DEFAULT_TIME_QUANTUM,
                        help=f'타임 퀀텀 (기본값 {DEFAULT_TIME_QUANTUM})')
    parser.add_argument('-s', '--switch-cost', type=int, default=CONTEXT_SWITCH_OVERHEAD,
                        help=f'문맥교환 오버헤드 (기본값 {CONTEXT_SWITCH_OVERHEAD})')
    parser.add_argument('--random', type=int, metavar='N', help='N개의 랜덤 프로세스 생성')
    parser.add_argument('--seed', type=int, help='랜덤 시드')
    parser.add_argument('--output-dir', default='simulation_results', help='결과 저장 디렉토리')
    parser.add_argument('--no-chart', action='store_true', help='결과 파일을 저장하지 않음')
    parser.add_argument('-v', '--verbose', action='store_true', help='이벤트 로그 출력')
    return parser


def main(argv=None):
    """메인 함수"""
    args = build_arg_parser().parse_args(argv)
    print_banner()

    try:
        if args.random:
            processes = InputParser.generate_random_processes(num_processes=args.random,
                                                              seed=args.seed)
        elif args.input:
            print(f"'{args.input}'에서 프로세스 로딩 중...")
            processes = InputParser.load(args.input)
        else:
            print("[오류] 입력 파일 또는 --random N 을 지정하세요.")
            return 1

        if not processes:
            print("[오류] 프로세스가 없습니다.")
            return 1

        InputParser.print_process_summary(processes)
        scheduler = RoundRobinScheduler(processes, time_slice=args.quantum,
                                        context_switch_overhead=args.switch_cost)
    except (InvalidWorkloadError, OSError) as e:
        print(f"[오류] {e}")
        return 1

    result = scheduler.run(verbose=args.verbose)

    visualizer = Visualizer()
    visualizer.print_statistics_table(result)
    visualizer.print_process_details(result)
    print(visualizer.render_text_gantt(result) + "\n")

    if not args.no_chart:
        save_results(result, args.output_dir)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n사용자에 의해 시뮬레이션이 중단되었습니다.")
        sys.exit(0)
