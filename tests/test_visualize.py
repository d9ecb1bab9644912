import os

from antsys import ACOConfig, ATSPInstance

import visualize


def test_visualize_writes_frames_and_gif(tmp_path):
    inst = ATSPInstance.random_asymmetric(4, seed=2, name="viz4")
    cfg = ACOConfig(n_ants=2, seed=2)
    gif = visualize.visualize(inst, cfg, rounds=3, outdir=str(tmp_path))
    assert os.path.exists(gif)
    assert sorted(p.name for p in tmp_path.glob("pheromone_*.png")) == [
        "pheromone_000.png", "pheromone_001.png", "pheromone_002.png"]
