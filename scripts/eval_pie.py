import requests, numpy as np
import os
URL = os.environ.get("PIEVIZ_BASE_URL", "http://127.0.0.1:8000") + "/pie/layout"


def run_once(rng):
    n = int(rng.integers(1, 12))
    values = rng.gamma(1.5, 10.0, n).round(3)
    if rng.random() < 0.1:
        values[:] = 0.0           # degenerate total, expect a 400
    labels = [f"c{i}" for i in range(n)]
    r = requests.post(URL, json={"labels": labels, "values": values.tolist()})
    if r.status_code == 400:
        return "rejected", None
    r.raise_for_status(); j = r.json()
    total = sum(s["percentage"] for s in j["slices"])
    return "rendered", total

def main(N=50, seed=7):
    rng = np.random.default_rng(seed)
    rendered = rejected = bad_sum = 0
    for _ in range(N):
        d, total = run_once(rng)
        if d == "rejected":
            rejected += 1
            continue
        rendered += 1
        bad_sum += abs(total - 100.0) > 1e-6
    print(f"runs={N}  rendered={rendered}  rejected={rejected}  bad_sums={bad_sum}")

if __name__ == "__main__":
    main()
