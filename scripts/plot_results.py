import json
import sys

import matplotlib.pyplot as plt


def load_log(path):
    with open(path, "r") as f:
        return json.load(f)


def main(log_path="logs/sim.json"):
    data = load_log(log_path)
    entries = [entry for entry in data if "metrics" in entry]
    ts = [entry["t"] for entry in entries]
    polarization = [entry["metrics"]["polarization"] for entry in entries]
    spread = [entry["metrics"]["mean_pairwise_distance"] for entry in entries]

    fig, (ax_pol, ax_spread) = plt.subplots(2, 1, sharex=True)
    ax_pol.plot(ts, polarization)
    ax_pol.set_ylabel("polarization")
    ax_pol.set_ylim(0.0, 1.05)
    ax_spread.plot(ts, spread)
    ax_spread.set_ylabel("mean pairwise distance")
    ax_spread.set_xlabel("tick")
    fig.suptitle("Flock order over time")
    plt.show()


if __name__ == "__main__":
    log = sys.argv[1] if len(sys.argv) > 1 else "logs/sim.json"
    main(log)
