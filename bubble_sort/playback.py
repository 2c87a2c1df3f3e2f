class Playback:
    """Pause state and the rules for when the simulation may advance.

    Manual steps are only honored while paused; while running the
    simulation advances once per frame. step() and tick() return whether
    advance() was called.
    """

    def __init__(self, sim, paused=True):
        self.sim = sim
        self.paused = paused

    def toggle_pause(self):
        self.paused = not self.paused

    def step(self):
        if not self.paused:
            return False
        self.sim.advance()
        return True

    def tick(self):
        if self.paused:
            return False
        self.sim.advance()
        return True

    def reset(self, sim):
        self.sim = sim
