from enum import Enum
from typing import Dict, List


class Language(str, Enum):
    en = "en"
    ko = "ko"

    @property
    def display_name(self) -> str:
        return "Korean" if self is Language.ko else "English"

    def other(self) -> "Language":
        return Language.en if self is Language.ko else Language.ko


class VideoAspectRatio(str, Enum):
    WIDE_16_9 = "16:9"
    PORTRAIT_9_16 = "9:16"
    SQUARE_1_1 = "1:1"
    CINEMA_21_9 = "21:9"
    CLASSIC_4_3 = "4:3"
    IMAX_1_43_1 = "1.43:1"
    ULTRAWIDE_32_9 = "32:9"


class VideoStyle(str, Enum):
    # Cinematic & Film
    CINEMATIC = "Cinematic"
    PHOTOREALISTIC = "Photorealistic"
    VINTAGE_FILM = "Vintage Film"
    NOIR = "Film Noir"
    DOCUMENTARY = "Documentary"
    WES_ANDERSON = "Wes Anderson Style"
    TARANTINO = "Tarantino Style"
    BLOCKBUSTER = "Hollywood Blockbuster"
    INDIE_FILM = "Indie Film"
    SILENT_MOVIE = "Silent Movie"
    VHS = "VHS Tape"

    # Animation & Art
    ANIME = "Anime"
    GHIBLI = "Studio Ghibli Style"
    DISNEY_PIXAR = "Disney/Pixar Style"
    ANIMATION_3D = "3D Animation"
    CLAYMATION = "Claymation (Stop Motion)"
    CYBERPUNK = "Cyberpunk"
    STEAMPUNK = "Steampunk"
    FANTASY = "Fantasy"
    SCI_FI = "Sci-Fi"
    OIL_PAINTING = "Oil Painting"
    WATERCOLOR = "Watercolor"
    SKETCH = "Pencil Sketch"
    PIXEL_ART = "Pixel Art"
    COMIC_BOOK = "Comic Book / Graphic Novel"
    LOW_POLY = "Low Poly 3D"
    UKIYO_E = "Ukiyo-e"

    # Modern & Abstract
    GLITCH = "Glitch Art"
    VAPORWAVE = "Vaporwave"
    SURREALISM = "Surrealism"
    ABSTRACT = "Abstract"
    MINIMALIST = "Minimalist"
    GOPRO = "GoPro Action"
    CCTV = "CCTV Footage"
    UNREAL_ENGINE = "Unreal Engine 5"
    ISOMETRIC = "Isometric 3D"
    MACRO = "Macro Photography"


class CameraMotion(str, Enum):
    # Basic movement
    STATIC = "Static"
    PAN = "Pan"
    TILT = "Tilt"
    ZOOM_IN = "Zoom In"
    ZOOM_OUT = "Zoom Out"
    PEDESTAL = "Pedestal (Up/Down)"
    TRUCK = "Truck (Left/Right)"
    ROLL = "Camera Roll"

    # Framing & angles
    EXTREME_CLOSE_UP = "Extreme Close-Up"
    CLOSE_UP = "Close-Up"
    MEDIUM_SHOT = "Medium Shot"
    WIDE_SHOT = "Wide Shot"
    ESTABLISHING_SHOT = "Establishing Shot"
    LOW_ANGLE = "Low Angle"
    HIGH_ANGLE = "High Angle"
    OVERHEAD = "Overhead / God's Eye"
    WORMS_EYE = "Worm's Eye View"
    EYE_LEVEL = "Eye Level"
    DUTCH_ANGLE = "Dutch Angle"

    # Advanced & dynamic
    DOLLY_ZOOM = "Dolly Zoom"
    TRACKING_SHOT = "Tracking Shot"
    CRANE = "Crane / Jib Shot"
    ORBIT = "Orbit / Arc"
    HANDHELD = "Handheld"
    SHAKEY_CAM = "Shakey Cam (Chaos)"
    DRONE_FLYOVER = "Drone Flyover"
    FPV = "FPV Speed Drone"
    FOLLOW_SHOT = "Follow Shot (Behind)"
    POV = "First Person View (POV)"
    GIMBAL = "Gimbal Smooth"
    STEADICAM = "Steadicam"
    WHIP_PAN = "Whip Pan"
    CRASH_ZOOM = "Crash Zoom"

    # Lens & effects
    RACK_FOCUS = "Rack Focus"
    DEEP_FOCUS = "Deep Focus"
    SHALLOW_FOCUS = "Shallow Focus (Bokeh)"
    FISH_EYE = "Fish Eye Lens"
    BULLET_TIME = "Bullet Time"

    # Time & speed
    SLOW_MOTION = "Slow Motion"
    TIME_LAPSE = "Time-Lapse"
    HYPER_LAPSE = "Hyper-Lapse"
    REVERSE = "Reverse Motion"


MOTION_CATEGORIES: Dict[str, List[CameraMotion]] = {
    "basic": [
        CameraMotion.STATIC, CameraMotion.PAN, CameraMotion.TILT,
        CameraMotion.ZOOM_IN, CameraMotion.ZOOM_OUT, CameraMotion.PEDESTAL,
        CameraMotion.TRUCK, CameraMotion.ROLL,
    ],
    "framing": [
        CameraMotion.EXTREME_CLOSE_UP, CameraMotion.CLOSE_UP,
        CameraMotion.MEDIUM_SHOT, CameraMotion.WIDE_SHOT,
        CameraMotion.ESTABLISHING_SHOT, CameraMotion.LOW_ANGLE,
        CameraMotion.HIGH_ANGLE, CameraMotion.OVERHEAD,
        CameraMotion.WORMS_EYE, CameraMotion.EYE_LEVEL,
        CameraMotion.DUTCH_ANGLE,
    ],
    "dynamic": [
        CameraMotion.DOLLY_ZOOM, CameraMotion.TRACKING_SHOT,
        CameraMotion.CRANE, CameraMotion.ORBIT, CameraMotion.HANDHELD,
        CameraMotion.SHAKEY_CAM, CameraMotion.DRONE_FLYOVER, CameraMotion.FPV,
        CameraMotion.FOLLOW_SHOT, CameraMotion.POV, CameraMotion.GIMBAL,
        CameraMotion.STEADICAM, CameraMotion.WHIP_PAN, CameraMotion.CRASH_ZOOM,
    ],
    "lens": [
        CameraMotion.RACK_FOCUS, CameraMotion.DEEP_FOCUS,
        CameraMotion.SHALLOW_FOCUS, CameraMotion.FISH_EYE,
        CameraMotion.BULLET_TIME,
    ],
    "time": [
        CameraMotion.SLOW_MOTION, CameraMotion.TIME_LAPSE,
        CameraMotion.HYPER_LAPSE, CameraMotion.REVERSE,
    ],
}
