import csv, os, time
#so you can report results
def log_render_run(path, n, total, decision):
    if not path:
        return
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    row = [time.strftime("%Y-%m-%d %H:%M:%S"), n, total if total is not None else "", decision]
    header = ["timestamp","n","total","decision"]
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.writer(f)
        if write_header: w.writerow(header)
        w.writerow(row)
