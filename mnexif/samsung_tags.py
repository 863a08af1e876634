# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Samsung MakerNote tag definitions

Tag tables for the Samsung "type 2" MakerNote (NX series and later compacts)
and for the PictureWizard composite tag (0x0021), whose five SHORT components
are decoded through their own table.

Copyright 2025 DNAi inc.
"""

from mnexif.i18n import N_
from mnexif.print_functions import (
    PRINT_CAMERA_TEMPERATURE,
    PRINT_EXIF_VERSION,
    PRINT_EXPOSURE_BIAS,
    PRINT_EXPOSURE_TIME,
    PRINT_FNUMBER,
    PRINT_FOCAL_LENGTH_35,
    PRINT_PW_COLOR,
    PRINT_VALUE,
    PRINT_VALUE_MINUS_4,
    print_composite,
    print_tag,
)
from mnexif.tag_info import (
    ANY_COUNT,
    UNKNOWN_TAG_ID,
    GroupId,
    SectionId,
    TagDescriptor,
    TagDetails,
    TagRegistry,
)
from mnexif.value_types import TypeId

# ============================================================
# Samsung2 lookup tables
# ============================================================

# LensType, tag 0xa003
SAMSUNG2_LENS_TYPE = TagDetails([
    (0, N_("Built-in")),
    (1, "Samsung NX 30mm F2 Pancake"),
    (2, "Samsung NX 18-55mm F3.5-5.6 OIS"),
    (3, "Samsung NX 50-200mm F4-5.6 ED OIS"),
    (4, "Samsung NX 20-50mm F3.5-5.6 ED"),
    (5, "Samsung NX 20mm F2.8 Pancake"),
    (6, "Samsung NX 18-200mm F3.5-6.3 ED OIS"),
    (7, "Samsung NX 60mm F2.8 Macro ED OIS SSA"),
    (8, "Samsung NX 16mm F2.4 Pancake"),
    (9, "Samsung NX 85mm F1.4 ED SSA"),
    (10, "Samsung NX 45mm F1.8"),
    (11, "Samsung NX 45mm F1.8 2D/3D"),
    (12, "Samsung NX 12-24mm F4-5.6 ED"),
    (13, "Samsung NX 16-50mm F2-2.8 S ED OIS"),
    (14, "Samsung NX 10mm F3.5 Fisheye"),
    (15, "Samsung NX 16-50mm F3.5-5.6 Power Zoom ED OIS"),
    (20, "Samsung NX 50-150mm F2.8 S ED OIS"),
    (21, "Samsung NX 300mm F2.8 ED OIS"),
])

# ColorSpace, tag 0xa011
SAMSUNG2_COLOR_SPACE = TagDetails([
    (0, N_("sRGB")),
    (1, N_("Adobe RGB")),
])

# SmartRange, tag 0xa012
SAMSUNG2_SMART_RANGE = TagDetails([
    (0, N_("Off")),
    (1, N_("On")),
])

# PictureWizard Mode, sub-tag 0x0000
SAMSUNG_PW_MODE = TagDetails([
    (0, N_("Standard")),
    (1, N_("Vivid")),
    (2, N_("Portrait")),
    (3, N_("Landscape")),
    (4, N_("Forest")),
    (5, N_("Retro")),
    (6, N_("Cool")),
    (7, N_("Calm")),
    (8, N_("Classic")),
    (9, N_("Custom1")),
    (10, N_("Custom2")),
    (11, N_("Custom3")),
])


def _samsung2(tag_id, name, label, description, type_id, formatter=PRINT_VALUE):
    return TagDescriptor(tag_id, name, label, description, GroupId.SAMSUNG2,
                         SectionId.MAKER_TAGS, type_id, ANY_COUNT, formatter)


def _samsung_pw(tag_id, name, label, description, formatter):
    return TagDescriptor(tag_id, name, label, description, GroupId.SAMSUNG_PW,
                         SectionId.MAKER_TAGS, TypeId.SHORT, 1, formatter)


# ============================================================
# Samsung2 MakerNote tags
# ============================================================

SAMSUNG2_TAGS = (
    _samsung2(0x0001, "Version", N_("Version"), N_("Makernote version"),
              TypeId.UNDEFINED, PRINT_EXIF_VERSION),
    _samsung2(0x0021, "PictureWizard", N_("Picture Wizard"), N_("Picture wizard composite tag"),
              TypeId.SHORT, print_composite(GroupId.SAMSUNG_PW)),
    _samsung2(0x0030, "LocalLocationName", N_("Local Location Name"), N_("Local location name"),
              TypeId.ASCII),
    _samsung2(0x0031, "LocationName", N_("Location Name"), N_("Location name"),
              TypeId.ASCII),
    _samsung2(0x0035, "Preview", N_("Pointer to a preview image"),
              N_("Offset to an IFD containing a preview image"), TypeId.LONG),
    _samsung2(0x0043, "CameraTemperature", N_("Camera Temperature"), N_("Camera temperature"),
              TypeId.SRATIONAL, PRINT_CAMERA_TEMPERATURE),
    _samsung2(0xa001, "FirmwareName", N_("Firmware Name"), N_("Firmware name"),
              TypeId.ASCII),
    _samsung2(0xa003, "LensType", N_("Lens Type"), N_("Lens type"),
              TypeId.SHORT, print_tag(SAMSUNG2_LENS_TYPE)),
    _samsung2(0xa004, "LensFirmware", N_("Lens Firmware"), N_("Lens firmware"),
              TypeId.ASCII),
    _samsung2(0xa010, "SensorAreas", N_("Sensor Areas"), N_("Sensor areas"),
              TypeId.LONG),
    _samsung2(0xa011, "ColorSpace", N_("Color Space"), N_("Color space"),
              TypeId.SHORT, print_tag(SAMSUNG2_COLOR_SPACE)),
    _samsung2(0xa012, "SmartRange", N_("Smart Range"), N_("Smart range"),
              TypeId.SHORT, print_tag(SAMSUNG2_SMART_RANGE)),
    _samsung2(0xa013, "ExposureBiasValue", N_("Exposure Bias Value"), N_("Exposure bias value"),
              TypeId.SRATIONAL, PRINT_EXPOSURE_BIAS),
    _samsung2(0xa014, "ISO", N_("ISO"), N_("ISO"),
              TypeId.LONG),
    _samsung2(0xa018, "ExposureTime", N_("Exposure Time"), N_("Exposure time"),
              TypeId.RATIONAL, PRINT_EXPOSURE_TIME),
    _samsung2(0xa019, "FNumber", N_("FNumber"), N_("The F number."),
              TypeId.RATIONAL, PRINT_FNUMBER),
    _samsung2(0xa01a, "FocalLengthIn35mmFormat", N_("Focal Length In 35mm Format"),
              N_("Focal length in 35mm format"), TypeId.LONG, PRINT_FOCAL_LENGTH_35),
    _samsung2(0xa020, "EncryptionKey", N_("Encryption Key"), N_("Encryption key"),
              TypeId.LONG),
    _samsung2(0xa021, "WB_RGGBLevelsUncorrected", N_("WB RGGB Levels Uncorrected"),
              N_("WB RGGB levels not corrected for WB_RGGBLevelsBlack"), TypeId.LONG),
    _samsung2(0xa022, "WB_RGGBLevelsAuto", N_("WB RGGB Levels Auto"), N_("WB RGGB levels auto"),
              TypeId.LONG),
    _samsung2(0xa023, "WB_RGGBLevelsIlluminator1", N_("WB RGGB Levels Illuminator1"),
              N_("WB RGGB levels illuminator1"), TypeId.LONG),
    _samsung2(0xa024, "WB_RGGBLevelsIlluminator2", N_("WB RGGB Levels Illuminator2"),
              N_("WB RGGB levels illuminator2"), TypeId.LONG),
    _samsung2(0xa028, "WB_RGGBLevelsBlack", N_("WB RGGB Levels Black"), N_("WB RGGB levels black"),
              TypeId.SLONG),
    _samsung2(0xa030, "ColorMatrix", N_("Color Matrix"), N_("Color matrix"),
              TypeId.SLONG),
    _samsung2(0xa031, "ColorMatrixSRGB", N_("Color Matrix sRGB"), N_("Color matrix sRGB"),
              TypeId.SLONG),
    _samsung2(0xa032, "ColorMatrixAdobeRGB", N_("Color Matrix Adobe RGB"), N_("Color matrix Adobe RGB"),
              TypeId.SLONG),
    _samsung2(0xa040, "ToneCurve1", N_("Tone Curve 1"), N_("Tone curve 1"),
              TypeId.LONG),
    _samsung2(0xa041, "ToneCurve2", N_("Tone Curve 2"), N_("Tone curve 2"),
              TypeId.LONG),
    _samsung2(0xa042, "ToneCurve3", N_("Tone Curve 3"), N_("Tone curve 3"),
              TypeId.LONG),
    _samsung2(0xa043, "ToneCurve4", N_("Tone Curve 4"), N_("Tone curve 4"),
              TypeId.LONG),
)

SAMSUNG2_UNKNOWN = _samsung2(UNKNOWN_TAG_ID, "(UnknownSamsung2MakerNoteTag)",
                             "(UnknownSamsung2MakerNoteTag)", N_("Unknown Samsung2MakerNote tag"),
                             TypeId.UNDEFINED)

# ============================================================
# Samsung PictureWizard tags (components of tag 0x0021)
# ============================================================

SAMSUNG_PW_TAGS = (
    _samsung_pw(0x0000, "Mode", N_("Mode"), N_("Mode"), print_tag(SAMSUNG_PW_MODE)),
    _samsung_pw(0x0001, "Color", N_("Color"), N_("Color"), PRINT_PW_COLOR),
    _samsung_pw(0x0002, "Saturation", N_("Saturation"), N_("Saturation"), PRINT_VALUE_MINUS_4),
    _samsung_pw(0x0003, "Sharpness", N_("Sharpness"), N_("Sharpness"), PRINT_VALUE_MINUS_4),
    _samsung_pw(0x0004, "Contrast", N_("Contrast"), N_("Contrast"), PRINT_VALUE_MINUS_4),
)

SAMSUNG_PW_UNKNOWN = _samsung_pw(UNKNOWN_TAG_ID, "(UnknownSamsungPictureWizardTag)",
                                 "(UnknownSamsungPictureWizardTag)", N_("Unknown SamsungPictureWizard tag"),
                                 PRINT_VALUE)

SAMSUNG2_REGISTRY = TagRegistry(GroupId.SAMSUNG2, SAMSUNG2_TAGS, SAMSUNG2_UNKNOWN)
SAMSUNG_PW_REGISTRY = TagRegistry(GroupId.SAMSUNG_PW, SAMSUNG_PW_TAGS, SAMSUNG_PW_UNKNOWN)
