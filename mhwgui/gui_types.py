"""Enumerations used by the GUI file format."""

from enum import IntEnum

__all__ = [
    "KeyValueType",
    "ObjectType",
    "FlowType",
    "BlendState",
    "SamplerMode",
    "ControlPoint",
    "Alignment",
    "ResolutionAdjust",
    "AutoWrap",
    "ColorControl",
    "EndConditionType",
    "LetterHAlign",
    "LetterVAlign",
    "DepthState",
    "Billboard",
    "DrawPass",
    "ScalingType",
    "MaskType",
    "IconColorType",
    "TilingMode",
    "KeyMode",
    "ParamType",
    "FontStyle",
]


class KeyValueType(IntEnum):
    """Which key-value buffer a keyframe value lives in."""

    NONE = 0
    KV8 = 1
    KV32 = 2
    KV128 = 3
    String = 4
    Extend = 5


class ObjectType(IntEnum):
    """Type hashes of GUI objects, instances, font filters and resources."""

    NONE = 0xCCCCCCCC
    cGUIObjRoot = 473969240
    cGUIObjColorAdjust = 122938906
    cGUIObj2D = 351760238
    cGUIObjScissorMask = 229195642
    cGUIObjNull = 796866380
    cGUIObjChildAnimationRoot = 663214884
    cGUIObjPolygon = 1587625923
    cGUIObjTexture = 459477923
    cGUIObjTextureSet = 1332881660
    cGUIObjMaterial = 1601273156
    cGUIObjMessage = 800599726
    cGUIObjText = 826240196
    cGUIObjEffect = 1344422210
    cGUIObjBaseModel = 2129076721
    cGUIObjHitRect = 691640339
    cGUIObjModel = 471103525
    cGUIObjSizeAdjustMessage = 304564904

    # Instance hashes
    cGUIInstAnimVariable = 1916600852
    cGUIInstAnimControl = 2084773514
    cGUIInstRoot = 1923362099
    cGUIInstNull = 1100687399
    cGUIInstScissorMask = 1882551812
    cGUIInstAnimation = 497711579
    cGUIInstGauge = 981162009
    cGUIInstAutoAnimation = 1252007991
    cGUIInstInput = 1235707108
    cGUIInstButtonList = 1786326969
    cGUIInstScrollBar = 2133789891
    cGUIInstSlider = 579080650
    cGUIInstText = 1608217519
    cGUIInstButtonGrid = 9506454
    cGUIInstButtonGridLink = 546128602
    cGUIInstButtonTree = 428837245
    cGUIInstChangeNumInput = 1108543649
    cGUIInstColorPallet = 1352762334
    cGUIInstCursor = 675048259
    cGUIInstFreeCursor = 524580423
    cGUIInstItemGrid = 1827074792
    cGUIInstMessage = 17244926
    cGUIInstMouseOverFilter = 47863894

    # Font filter hashes
    cGUIFontFilterShadow = 1601192516
    cGUIFontFilterBorder = 1844685598
    cGUIFontFilterShading = 1026938010
    cGUIFontFilterGradationOverlay = 1998668322
    cGUIFontFilterTextureBlend = 1482942597
    cGUIFontFilterDistanceField = 1670580032

    # Misc hashes
    rEffectAsset = 795748986

    # MHGU only
    cGUIObjTexWithParam = 0x413023E9
    cGUIObjBlendTextureSample = 0x27A477BF
    cGUIObjFreePolygon = 0x0AD8C6E9
    cFestaGUIObjPolygon = 0x35929810
    cFestaGUIObjTexture = 0x7050B470


class FlowType(IntEnum):
    START = 0x0
    END_0 = 0x1
    PROCESS = 0x2
    INPUT = 0x3
    SWITCH = 0x4
    FUNCTION = 0x5


class BlendState(IntEnum):
    DEFAULT = 0x0
    BlendAlpha = 0x1
    BlendInvAlpha = 0x2
    Add = 0x3
    Mul = 0x4
    AddAlpha = 0x5
    AddInvAlpha = 0x6
    BlendFactor = 0x7
    BlendFactorAlpha = 0x8
    Max = 0x9
    AddColor = 0xA
    BlendColor = 0xB
    RevSubAlpha = 0xC
    RevSubInvAlpha = 0xD
    RevSubBlendAlpha = 0xE
    RevSubColor = 0xF
    RevSubBlendColor = 0x10
    RevSub = 0x11
    ColorBlendAlphaAdd = 0x12
    AddRGB = 0x13
    AddInvColor = 0x14


class SamplerMode(IntEnum):
    WrapLinear = 0x0
    ClampLinear = 0x1
    WrapPoint = 0x2
    ClampPoint = 0x3


class ControlPoint(IntEnum):
    TL = 0x0
    TC = 0x1
    TR = 0x2
    UNK_3 = 0x3
    CL = 0x4
    CC = 0x5
    CR = 0x6
    UNK_7 = 0x7
    BL = 0x8
    BC = 0x9
    BR = 0xA


class Alignment(IntEnum):
    NONE = 0x0
    LT = 0x1
    CT = 0x2
    RT = 0x3
    LC = 0x4
    CC = 0x5
    RC = 0x6
    LB = 0x7
    CB = 0x8
    RB = 0x9


class ResolutionAdjust(IntEnum):
    FOLLOW = 0x0
    NONE = 0x1
    VARIABLE = 0x2
    VARIABLE_STRETCH = 0x3
    VARIABLE_SHRINK = 0x4
    SMALLPROP = 0x5
    SMALLPROP_STRETCH = 0x6
    SMALLPROP_SHRINK = 0x7
    BIGPROP = 0x8
    BIGPROP_STRETCH = 0x9
    BIGPROP_SHRINK = 0xA


class AutoWrap(IntEnum):
    NONE = 0x0
    WIDTH = 0x1
    POINT = 0x2


class ColorControl(IntEnum):
    SCALING = 0x0
    ATTRIBUTE = 0x1
    NONE = 0x2


class EndConditionType(IntEnum):
    FLOW_ANIMATION_END = 0x0
    FRAME_COUNT = 0x1
    INFINITE_ = 0x2
    CHANGE_VARIABLE = 0x3
    ANIMATION_END = 0x4


class LetterHAlign(IntEnum):
    LEFT = 0x0
    CENTER = 0x1
    RIGHT = 0x2


class LetterVAlign(IntEnum):
    TOP = 0x0
    CENTER = 0x1
    BOTTOM = 0x2
    BASELINE = 0x3


class DepthState(IntEnum):
    FOLLOW = 0x0
    DISABLE = 0x1
    TEST = 0x2
    WRITE = 0x3
    TEST_WRITE = 0x4


class Billboard(IntEnum):
    NONE = 0x0
    XYZ = 0x1
    Y = 0x2


class DrawPass(IntEnum):
    FOLLOW = 0x0
    SOLID = 0x1
    SCREEN = 0x2
    TRANSPARENT_ = 0x3
    NUM = 0x4
    USER_OFFSET = 0x10


class ScalingType(IntEnum):
    NONE = 0x0
    POSITION = 0x1
    SIZE = 0x2
    FULL = 0x3


class MaskType(IntEnum):
    NONE = 0x0
    ON = 0x1
    REVERSE = 0x2
    ALPHA = 0x3
    ON_ADD = 0x4
    REVERSE_ADD = 0x5
    ALPHA_ADD = 0x6


class IconColorType(IntEnum):
    NOINFLUENCE = 0x0
    ALPHA = 0x1
    ALL = 0x2


class TilingMode(IntEnum):
    TILING_NONE = 0x0
    TILING_SCALE = 0x1
    TILING_NO_SCALE = 0x2
    TILING_NUM = 0x3


class KeyMode(IntEnum):
    CONSTANT_0 = 0x0
    OFFSET_0 = 0x1
    TRIGGER_0 = 0x2
    LINEAR_0 = 0x3
    OFFSET_F_0 = 0x4
    HERMITE_0 = 0x5
    EASEIN = 0x6
    EASEOUT = 0x7
    HERMITE2 = 0x8
    NUM_8 = 0x9
    SUMMARY = 0xA
    DEFAULT_10 = 0xB


class ParamType(IntEnum):
    UNKNOWN = 0x0
    INT = 0x1
    FLOAT = 0x2
    BOOL = 0x3
    VECTOR = 0x4
    RESOURCE = 0x5
    STRING = 0x6
    TEXTURE = 0x7
    FONT = 0x8
    MESSAGE = 0x9
    VARIABLE = 0xA
    ANIMATION = 0xB
    EVENT = 0xC
    GUIRESOURCE = 0xD
    FONT_FILTER = 0xE
    ANIMEVENT = 0xF
    SEQUENCE = 0x10
    INIT_BOOL = 0x11
    INIT_INT = 0x12
    GENERALRESOURCE = 0x13
    INIT_INT32 = 0x14


class FontStyle(IntEnum):
    MOJI_WHITE_DEFAULT = 1
    MOJI_WHITE_SELECTED = 2
    MOJI_WHITE_SELECTED2 = 4
    MOJI_WHITE_DISABLE = 5
    MOJI_WHITE_DEFAULT2 = 6
    MOJI_BLACK_DEFAULT = 7
    MOJI_RED_DEFAULT = 8
    MOJI_RED_SELECTED = 9
    MOJI_RED_SELECTED2 = 10
    MOJI_RED_DISABLE = 11
    MOJI_YELLOW_DEFAULT = 12
    MOJI_YELLOW_SELECTED = 13
    MOJI_YELLOW_SELECTED2 = 14
    MOJI_YELLOW_DISABLE = 15
    MOJI_ORANGE_DEFAULT = 16
    MOJI_ORANGE_SELECTED2 = 17
    MOJI_ORANGE_SELECTED = 18
    MOJI_ORANGE_DISABLE = 19
    MOJI_GREEN_SELECTED = 20
    MOJI_GREEN_DEFAULT = 21
    MOJI_GREEN_SELECTED2 = 22
    MOJI_GREEN_DISABLE = 23
    MOJI_LIGHTBLUE_DEFAULT = 25
    MOJI_LIGHTBLUE_SELECTED2 = 26
    MOJI_LIGHTBLUE_SELECTED = 27
    MOJI_LIGHTBLUE2_DEFAULT = 28
    MOJI_LIGHTBLUE2_SELECTED2 = 29
    MOJI_LIGHTBLUE2_SELECTED = 30
    MOJI_LIGHTGREEN_DEFAULT = 31
    MOJI_LIGHTGREEN_SELECTED = 32
    MOJI_LIGHTGREEN_DISABLE = 33
    MOJI_BROWN_DEFAULT = 34
    MOJI_BROWN_SELECTED2 = 35
    MOJI_BROWN_SELECTED = 36
    MOJI_YELLOW2_DEFAULT = 37
    MOJI_YELLOW2_SELECTED2 = 38
    MOJI_ORENGE2_DEFAULT = 39
    MOJI_ORENGE2_SELECTED2 = 40
    MOJI_ORENGE2_DISABLE = 41
    MOJI_ORENGE2_SELECTED = 42
    MOJI_LIGHTBLUE_DISABLE = 43
    MOJI_LIGHTBLUE2_DISABLE = 44
    MOJI_BROWN_DISABLE = 46
    MOJI_YELLOW2_SELECTED = 47
    MOJI_YELLOW2_DISABLE = 48
    MOJI_LIGHTYELLOW_DEFAULT = 49
    MOJI_LIGHTYELLOW_SELECTED = 50
    MOJI_LIGHTYELLOW_SELECTED2 = 51
    MOJI_LIGHTYELLOW_DISABLE = 52
    MOJI_SLGREEN_DEFAULT = 53
    MOJI_SLGREEN_SELECTED = 54
    MOJI_SLGREEN_SELECTED2 = 55
    MOJI_SLGREEN_DISABLE = 56
    MOJI_LIGHTGREEN_SELECTED2 = 57
    MOJI_SLGREEN2_DEFAULT = 58
    MOJI_SLGREEN2_SELECTED = 59
    MOJI_SLGREEN2_SELECTED2 = 60
    MOJI_SLGREEN2_DISABLE = 61
    MOJI_LIGHTYELLOW2_DEFAULT = 62
    MOJI_LIGHTYELLOW2_SELECTED = 63
    MOJI_LIGHTYELLOW2_SELECTED2 = 64
    MOJI_LIGHTYELLOW2_DISABLE = 65
    MOJI_PURPLE_DEFAULT = 67
    MOJI_PURPLE_DISABLE = 68
    MOJI_PURPLE_SELECTED = 69
    MOJI_PURPLE_SELECTED2 = 70
    MOJI_RED2_DEFAULT = 71
    MOJI_RED2_SELECTED = 72
    MOJI_RED2_SELECTED2 = 73
    MOJI_RED2_DISABLE = 74
    MOJI_BLUE_DISABLE = 75
    MOJI_BLUE_SELECTED2 = 76
    MOJI_BLUE_SELECTED = 77
    MOJI_BLUE_DEFAULT = 78
    MOJI_PALEBLUE_DEFAULT = 79
    MOJI_PALEBLUE_SELECTED = 80
    MOJI_PALEBLUE_SELECTED2 = 81
    MOJI_PALEBLUE_DISABLE = 82