from typings.color import BLACK, RED, Color


class SceneSettings:
    def __init__(self, hit_color: Color = RED, background_color: Color = BLACK) -> None:
        self.hit_color: Color = hit_color
        self.background_color: Color = background_color
