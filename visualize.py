import os, argparse
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import imageio

from antsys import ACOConfig, ATSPInstance, city_label, run_rounds


def save_heatmap(tau, title, path, vmax=None):
    labels = [city_label(i) for i in range(tau.shape[0])]
    fig, ax = plt.subplots(figsize=(5, 4.5))
    im = ax.imshow(tau, cmap="viridis", interpolation="nearest", vmin=0.0, vmax=vmax)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels)
    ax.set_xlabel("to")
    ax.set_ylabel("from")
    ax.set_title(title)
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="pheromone")
    fig.tight_layout()
    fig.savefig(path, dpi=120, bbox_inches="tight")
    plt.close(fig)
    return path


def visualize(inst, cfg, rounds, outdir, duration=0.6):
    """One heatmap PNG per round plus a GIF of all of them."""
    os.makedirs(outdir, exist_ok=True)
    df, snapshots = run_rounds(inst, cfg, n_rounds=rounds)
    vmax = max(float(s.max()) for s in snapshots)

    frames = []
    for it, tau in enumerate(snapshots):
        costs = df[df["round"] == it + 1]["cost"]
        title = f"{inst.name} round {it+1}\nmin ant cost = {costs.min():.2f}"
        frame_path = os.path.join(outdir, f"pheromone_{it:03d}.png")
        frames.append(save_heatmap(tau, title, frame_path, vmax=vmax))

    gif_path = os.path.join(outdir, "pheromone_rounds.gif")
    with imageio.get_writer(gif_path, mode="I", duration=duration) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))
    return gif_path


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--csv", default=None, help="cost matrix CSV (random instance if omitted)")
    p.add_argument("--n", type=int, default=8, help="number of cities")
    p.add_argument("--rounds", type=int, default=20)
    p.add_argument("--ants", type=int, default=8)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    args = p.parse_args(argv)

    if args.csv:
        inst = ATSPInstance.from_csv(args.csv)
    else:
        inst = ATSPInstance.random_asymmetric(args.n, seed=args.seed, name=f"viz{args.n}")
    cfg = ACOConfig(alpha=1.0, beta=3.0, rho=0.5, Q=1.0, tau0=1.0, n_ants=args.ants, seed=args.seed)
    gif_path = visualize(inst, cfg, args.rounds, args.outdir)
    print("Saved:", gif_path)


if __name__ == "__main__":
    main()
