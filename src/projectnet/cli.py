import argparse, json, logging, sys
import pandas as pd
from .config import LOG_FORMAT
from .data_loader import load_tasks
from .errors import ProjectnetError
from .graph import TaskGraph
from .kpis import compute_kpis
from .layout import LAYOUTS, ORIENTATIONS, node_positions
from .schedule import compute_schedule
def build_parser():
    ap=argparse.ArgumentParser(prog='projectnet', description='Critical path schedule for a task table')
    ap.add_argument('--data', required=True, help='.xlsx, .csv or .json task table')
    ap.add_argument('--sheet', default='Tasks'); ap.add_argument('--diagnostics', action='store_true')
    ap.add_argument('--layout', choices=LAYOUTS); ap.add_argument('--orientation', choices=ORIENTATIONS, default='TB')
    ap.add_argument('--log-level', default='WARNING', choices=['DEBUG','INFO','WARNING','ERROR'])
    return ap
def main(argv=None):
    ap=build_parser(); args=ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    try:
        tasks=load_tasks(args.data, sheet=args.sheet)
    except (ProjectnetError, OSError, ValueError) as e:
        ap.exit(1, f'projectnet: error: {e}\n')
    result=compute_schedule(tasks, diagnostics=args.diagnostics)
    k=compute_kpis(TaskGraph.build(tasks), result)
    print('# Summary'); print(json.dumps(k, indent=2))
    frame=result.to_frame()
    if args.layout:
        pos=node_positions(result, args.layout, args.orientation)
        frame['x']=pd.Series({tid: p[0] for tid,p in pos.items()}); frame['y']=pd.Series({tid: p[1] for tid,p in pos.items()})
    print('# Schedule'); print(frame.to_string())
    if result.diagnostics is not None:
        print('# Diagnostics'); print(json.dumps(result.diagnostics.to_dict(), indent=2))
    return 0
if __name__=='__main__': sys.exit(main())
