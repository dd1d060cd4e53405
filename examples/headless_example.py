"""Run the N-body scenario without a terminal and print its state."""

from nbody_tui import Config, NBody
from nbody_tui.utils.reproducibility import set_all_seeds


def main():
    """Step a five-body scenario and report body positions."""
    config = Config(bodies=5, seed=42, paused=False)
    rng = set_all_seeds(config.seed)

    # Engine wrapping the scenario; no renderer needed for stepping
    engine = NBody.init(config, rng)
    sim = engine.simulation

    print("Running simulation...")
    for step in range(300):
        engine.step()
        if step % 100 == 0:
            print(f"Step {step}:")
            for line in sim.info_text():
                print(f"  {line.marker.glyph} {line.text}")

    print(f"Trail markers kept: {len(sim.trail)}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
