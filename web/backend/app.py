"""
Round Robin 스케줄러 시뮬레이터 - FastAPI 백엔드
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List

from core.process import Process, InvalidWorkloadError
from core.scheduler_base import CONTEXT_SWITCH_OVERHEAD
from schedulers.round_robin import RoundRobinScheduler, DEFAULT_TIME_QUANTUM

app = FastAPI(
    title="Round Robin Scheduler Simulator",
    description="Round Robin CPU 스케줄링 시뮬레이터 (I/O 대기 및 문맥교환 오버헤드 포함)",
    version="1.0.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic 모델
class ProcessInput(BaseModel):
    pid: int
    arrival_time: int
    cpu_bursts: List[int]
    io_waits: List[int] = Field(default_factory=list)


class SimulationRequest(BaseModel):
    processes: List[ProcessInput]
    time_quantum: int = DEFAULT_TIME_QUANTUM
    context_switch_overhead: int = CONTEXT_SWITCH_OVERHEAD


def create_process_objects(process_inputs: List[ProcessInput]) -> List[Process]:
    """ProcessInput을 Process 객체로 변환"""
    return [
        Process(
            pid=p.pid,
            arrival_time=p.arrival_time,
            cpu_bursts=p.cpu_bursts,
            io_waits=p.io_waits
        )
        for p in process_inputs
    ]


@app.get("/")
async def root():
    return {"message": "Round Robin Scheduler Simulator API", "version": "1.0.0"}


@app.post("/simulate")
async def simulate(request: SimulationRequest):
    """스케줄링 시뮬레이션 실행"""
    try:
        processes = create_process_objects(request.processes)
        scheduler = RoundRobinScheduler(
            processes,
            time_slice=request.time_quantum,
            context_switch_overhead=request.context_switch_overhead
        )
    except InvalidWorkloadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = scheduler.run()
    return {"success": True, "result": result.to_dict()}


@app.get("/sample-processes")
async def get_sample_processes():
    """샘플 프로세스 데이터 반환"""
    return {
        "samples": [
            {
                "name": "기본 테스트 (3개 프로세스)",
                "processes": [
                    {"pid": 1, "arrival_time": 0, "cpu_bursts": [10], "io_waits": []},
                    {"pid": 2, "arrival_time": 2, "cpu_bursts": [5], "io_waits": []},
                    {"pid": 3, "arrival_time": 5, "cpu_bursts": [15], "io_waits": []}
                ]
            },
            {
                "name": "I/O 포함 (3개 프로세스)",
                "processes": [
                    {"pid": 1, "arrival_time": 0, "cpu_bursts": [5, 5], "io_waits": [3]},
                    {"pid": 2, "arrival_time": 1, "cpu_bursts": [3, 3], "io_waits": [2]},
                    {"pid": 3, "arrival_time": 2, "cpu_bursts": [8], "io_waits": []}
                ]
            }
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
