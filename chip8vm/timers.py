class TimerBank:
    """Delay and sound countdowns.

    Instructions set them; the caller's 60Hz pacer calls tick().
    """

    def __init__(self):
        self.delay = 0
        self.sound = 0

    def reset(self):
        self.delay = 0
        self.sound = 0

    def set_delay(self, value):
        self.delay = value & 0xFF

    def set_sound(self, value):
        self.sound = value & 0xFF

    @property
    def sound_active(self):
        return self.sound > 0

    def tick(self):
        # Delay timer
        if self.delay > 0:
            self.delay -= 1
        # Sound timer
        if self.sound > 0:
            self.sound -= 1
