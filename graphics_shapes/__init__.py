# Re-export core geometry API for convenience
from .config import GeometryConfig, DEFAULT_CONFIG
from .coord import Coord, to_coord
from .lerp import flerp, inv_flerp
from .affine import Affine2D
from .geometry import Shape, ShapeKind
from .line import Line, LineType
from .rect import Rect
from .circle import Circle
from .ellipse import Ellipse
from .triangle import Triangle, AngleType, SideType, AnglePosition, FlatSide
from .polygon import Polygon
from .shape_box import ShapeBox
from .intersection import intersects
from .contains import contains_shape
from .serialization import (
    coord_to_dict,
    coord_from_dict,
    shape_to_dict,
    shape_from_dict,
    dumps,
    loads,
)
