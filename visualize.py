import os, argparse, tempfile, shutil
from dataclasses import replace

import numpy as np
import matplotlib.pyplot as plt
import imageio

from gate_aco import ToyModelInstance, ACOConfig
from gate_aco.experiments import run_trial


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_convergence(history, save_path, title="MMAS convergence"):
    plt.figure()
    plt.plot(range(1, len(history) + 1), history)
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far score")
    plt.title(title)
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()
    return save_path


def make_pheromone_gif(inst, cfg, save_gif, step=5, frames_dir=None, keep_frames=False):
    """Render the trail matrix every `step` iterations as a heatmap and stitch the frames into a GIF."""
    result = run_trial(inst, cfg, record_pheromone=True)
    history = result.history_pheromone
    if not history:
        raise ValueError("The trial ended before the first iteration; nothing to draw.")

    tmpdir_was_auto = False
    if frames_dir is None:
        frames_dir = tempfile.mkdtemp(prefix="pheromone_frames_")
        tmpdir_was_auto = True
    else:
        os.makedirs(frames_dir, exist_ok=True)

    vmax = max(float(np.max(tau)) for tau in history)
    frames = []
    for it in range(0, len(history), step):
        tau = history[it]
        plt.figure(figsize=(4, max(3, 0.25 * inst.n_gates())))
        plt.imshow(tau, aspect="auto", cmap="viridis", vmin=0.0, vmax=vmax)
        plt.colorbar(label="trail")
        plt.xticks([0, 1], ["option 0", "option 1"])
        plt.ylabel("Gate")
        plt.title(f"iter={it + 1} best={result.history_best_scores[it]:.0f}")
        plt.tight_layout()
        frame_path = os.path.join(frames_dir, f"pheromone_{it:04d}.png")
        plt.savefig(frame_path, dpi=100)
        plt.close()
        frames.append(frame_path)

    ensure(save_gif)
    with imageio.get_writer(save_gif, mode="I", duration=0.4) as w:
        for fp in frames:
            w.append_data(imageio.v2.imread(fp))

    if not keep_frames and tmpdir_was_auto:
        shutil.rmtree(frames_dir, ignore_errors=True)
    elif keep_frames:
        print("Frames saved in:", frames_dir)
    return result


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--benchmark", default=None, help="benchmark file; random target if omitted")
    p.add_argument("--n", type=int, default=30, help="number of gates for a random target")
    p.add_argument("--ants", type=int, default=20)
    p.add_argument("--iters", type=int, default=200)
    p.add_argument("--restart-iters", type=int, default=25)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=5, help="frame every k iterations")
    p.add_argument("--keep-frames", action="store_true")
    args = p.parse_args()

    if args.benchmark:
        inst = ToyModelInstance.from_file(args.benchmark)
    else:
        inst = ToyModelInstance.random(args.n, seed=args.seed, name=f"random{args.n}")
    # optimal=-1 keeps the colony running past the exact match so restarts show up
    cfg = replace(ACOConfig(), n_ants=args.ants, max_iters=args.iters, restart_iters=args.restart_iters,
                  max_time=float("inf"), optimal=-1.0, seed=args.seed)

    gif_path = os.path.join(args.outdir, f"{inst.name}_pheromone.gif")
    result = make_pheromone_gif(inst, cfg, gif_path, step=args.step,
                                frames_dir=os.path.join(args.outdir, "frames") if args.keep_frames else None,
                                keep_frames=args.keep_frames)
    print("Saved:", gif_path)
    conv_png = plot_convergence(result.history_best_scores,
                                os.path.join(args.outdir, f"{inst.name}_convergence.png"))
    print("Saved:", conv_png)


if __name__ == "__main__":
    main()
