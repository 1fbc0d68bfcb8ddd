"""Demo script: run the orbital preset in 3D and report its orbit."""
from ascent_sim import calculate_trajectory_3d, create_default_config
from ascent_sim.orbital_elements import ApsisTracker
import numpy as np

config = create_default_config()
samples = calculate_trajectory_3d(config)

print("\n\n===== ASCENT DETAILS =====")
if len(samples) > 0:
    times = np.array([s.time for s in samples])
    alts = np.array([s.altitude for s in samples]) / 1000
    vels = np.array([s.speed for s in samples])
    masses = np.array([s.mass for s in samples])
    print(f"Samples: {len(samples)}")
    print(f"Time range: {times[0]:.1f}s - {times[-1]:.1f}s")
    print(f"Peak altitude: {np.max(alts):.1f} km")
    print(f"Final altitude: {alts[-1]:.1f} km")
    print(f"Final velocity: {vels[-1]:.1f} m/s")
    print(f"Final mass: {masses[-1]:.1f} kg")
    print()
    print("Engine Timeline:")
    prev_on = None
    for s in samples:
        on = s.thrust_magnitude > 0
        if on != prev_on:
            print(f"  t={s.time:8.1f}s | Alt={s.altitude/1000:8.1f} km | "
                  f"V={s.speed:8.1f} m/s | Engine: {'ON' if on else 'OFF'}")
            prev_on = on

print()
print("===== APSIDES =====")
tracker = ApsisTracker()
for s in samples:
    event = tracker.update(s.position)
    if event is not None:
        print(f"  t={s.time:8.1f}s | {event.kind.value}: {event.altitude/1000:.2f} km")
