"""Barcode Scanner page (0x8C)."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class BarcodeScannerUsage(IntEnum):
    """Named usages of the Barcode Scanner page."""

    UNDEFINED = 0x00
    BARCODE_BADGE_READER = 0x01
    BARCODE_SCANNER = 0x02
    DUMB_BAR_CODE_SCANNER = 0x03
    CORDLESS_SCANNER_BASE = 0x04
    BAR_CODE_SCANNER_CRADLE = 0x05
    ATTRIBUTE_REPORT = 0x10
    SETTINGS_REPORT = 0x11
    SCANNED_DATA_REPORT = 0x12
    RAW_SCANNED_DATA_REPORT = 0x13
    TRIGGER_REPORT = 0x14
    STATUS_REPORT = 0x15
    UPC_EAN_CONTROL_REPORT = 0x16
    EAN_2_3_LABEL_CONTROL_REPORT = 0x17
    CODE_39_CONTROL_REPORT = 0x18
    INTERLEAVED_2_OF_5_CONTROL_REPORT = 0x19
    STANDARD_2_OF_5_CONTROL_REPORT = 0x1A
    MSI_PLESSEY_CONTROL_REPORT = 0x1B
    CODABAR_CONTROL_REPORT = 0x1C
    CODE_128_CONTROL_REPORT = 0x1D
    MISC_1D_CONTROL_REPORT = 0x1E
    TWO_D_CONTROL_REPORT = 0x1F
    AIMING_POINTER_MODE = 0x30
    BAR_CODE_PRESENT_SENSOR = 0x31
    CLASS_1A_LASER = 0x32
    CLASS_2_LASER = 0x33
    HEATER_PRESENT = 0x34
    CONTACT_SCANNER = 0x35
    ELECTRONIC_ARTICLE_SURVEILLANCE_NOTIFICATION = 0x36
    CONSTANT_ELECTRONIC_ARTICLE_SURVEILLANCE = 0x37
    ERROR_INDICATION = 0x38
    FIXED_BEEPER = 0x39
    GOOD_DECODE_INDICATION = 0x3A
    HANDS_FREE_SCANNING = 0x3B
    INTRINSICALLY_SAFE = 0x3C
    KLASSE_EINS_LASER = 0x3D
    LONG_RANGE_SCANNER = 0x3E
    MIRROR_SPEED_CONTROL = 0x3F
    NOT_ON_FILE_INDICATION = 0x40
    PROGRAMMABLE_BEEPER = 0x41
    TRIGGERLESS = 0x42
    WAND = 0x43
    WATER_RESISTANT = 0x44
    MULTI_RANGE_SCANNER = 0x45
    PROXIMITY_SENSOR = 0x46
    FRAGMENT_DECODING = 0x4D
    SCANNER_READ_CONFIDENCE = 0x4E
    DATA_PREFIX = 0x4F
    PREFIX_AIMI = 0x50
    PREFIX_NONE = 0x51
    PREFIX_PROPRIETARY = 0x52
    ACTIVE_TIME = 0x54
    AIMING_LASER_PATTERN = 0x55
    BAR_CODE_PRESENT = 0x56
    BEEPER_STATE = 0x57
    LASER_ON_TIME = 0x58
    LASER_STATE = 0x59
    LOCKOUT_TIME = 0x5A
    MOTOR_STATE = 0x5B
    MOTOR_TIMEOUT = 0x5C
    POWER_ON_RESET_SCANNER = 0x5D
    PREVENT_READ_OF_BARCODES = 0x5E
    INITIATE_BARCODE_READ = 0x5F
    TRIGGER_STATE = 0x60
    TRIGGER_MODE = 0x61
    TRIGGER_MODE_BLINKING_LASER_ON = 0x62
    TRIGGER_MODE_CONTINUOUS_LASER_ON = 0x63
    TRIGGER_MODE_LASER_ON_WHILE_PULLED = 0x64
    TRIGGER_MODE_LASER_STAYS_ON_AFTER_RELEASE = 0x65
    COMMIT_PARAMETERS_TO_NVM = 0x6D
    PARAMETER_SCANNING = 0x6E
    PARAMETERS_CHANGED = 0x6F
    SET_PARAMETER_DEFAULT_VALUES = 0x70
    SCANNER_IN_CRADLE = 0x74
    SCANNER_IN_RANGE = 0x75
    AIM_DURATION = 0x7A
    GOOD_READ_LAMP_DURATION = 0x7B
    GOOD_READ_LAMP_INTENSITY = 0x7C
    GOOD_READ_LED = 0x7D
    GOOD_READ_TONE_FREQUENCY = 0x7E
    GOOD_READ_TONE_LENGTH = 0x7F
    GOOD_READ_TONE_VOLUME = 0x80
    NO_READ_MESSAGE = 0x82
    NOT_ON_FILE_VOLUME = 0x83
    POWERUP_BEEP = 0x84
    SOUND_ERROR_BEEP = 0x85
    SOUND_GOOD_READ_BEEP = 0x86
    SOUND_NOT_ON_FILE_BEEP = 0x87
    GOOD_READ_WHEN_TO_WRITE = 0x88
    GRWTI_AFTER_DECODE = 0x89
    GRWTI_BEEP_LAMP_AFTER_TRANSMIT = 0x8A
    GRWTI_NO_BEEP_LAMP_USE_AT_ALL = 0x8B
    BOOKLAND_EAN = 0x91
    CONVERT_EAN_8_TO_13_TYPE = 0x92
    CONVERT_UPC_A_TO_EAN_13 = 0x93
    CONVERT_UPC_E_TO_A = 0x94
    EAN_13 = 0x95
    EAN_8 = 0x96
    EAN_99_128_MANDATORY = 0x97
    EAN_99_P5_128_OPTIONAL = 0x98
    ENABLE_EAN_TWO_LABEL = 0x99
    UPC_EAN = 0x9A
    UPC_EAN_COUPON_CODE = 0x9B
    UPC_EAN_PERIODICALS = 0x9C
    UPC_A = 0x9D
    UPC_A_WITH_128_MANDATORY = 0x9E
    UPC_A_WITH_128_OPTIONAL = 0x9F
    UPC_A_WITH_P5_OPTIONAL = 0xA0
    UPC_E = 0xA1
    UPC_E1 = 0xA2
    PERIODICAL = 0xA9
    PERIODICAL_AUTO_DISCRIMINATE_PLUS_2 = 0xAA
    PERIODICAL_ONLY_DECODE_WITH_PLUS_2 = 0xAB
    PERIODICAL_IGNORE_PLUS_2 = 0xAC
    PERIODICAL_AUTO_DISCRIMINATE_PLUS_5 = 0xAD
    PERIODICAL_ONLY_DECODE_WITH_PLUS_5 = 0xAE
    PERIODICAL_IGNORE_PLUS_5 = 0xAF
    CHECK = 0xB0
    CHECK_DISABLE_PRICE = 0xB1
    CHECK_ENABLE_4_DIGIT_PRICE = 0xB2
    CHECK_ENABLE_5_DIGIT_PRICE = 0xB3
    CHECK_ENABLE_EUROPEAN_4_DIGIT_PRICE = 0xB4
    CHECK_ENABLE_EUROPEAN_5_DIGIT_PRICE = 0xB5
    EAN_TWO_LABEL = 0xB7
    EAN_THREE_LABEL = 0xB8
    EAN_8_FLAG_DIGIT_1 = 0xB9
    EAN_8_FLAG_DIGIT_2 = 0xBA
    EAN_8_FLAG_DIGIT_3 = 0xBB
    EAN_13_FLAG_DIGIT_1 = 0xBC
    EAN_13_FLAG_DIGIT_2 = 0xBD
    EAN_13_FLAG_DIGIT_3 = 0xBE
    ADD_EAN_2_3_LABEL_DEFINITION = 0xBF
    CLEAR_ALL_EAN_2_3_LABEL_DEFINITIONS = 0xC0
    CODABAR = 0xC3
    CODE_128 = 0xC4
    CODE_39 = 0xC7
    CODE_93 = 0xC8
    FULL_ASCII_CONVERSION = 0xC9
    INTERLEAVED_2_OF_5 = 0xCA
    ITALIAN_PHARMACY_CODE = 0xCB
    MSI_PLESSEY = 0xCC
    STANDARD_2_OF_5_IATA = 0xCD
    STANDARD_2_OF_5 = 0xCE
    TRANSMIT_START_STOP = 0xD3
    TRI_OPTIC = 0xD4
    UCC_EAN_128 = 0xD5
    CHECK_DIGIT = 0xD6
    CHECK_DIGIT_DISABLE = 0xD7
    CHECK_DIGIT_ENABLE_INTERLEAVED_2_OF_5_OPCC = 0xD8
    CHECK_DIGIT_ENABLE_INTERLEAVED_2_OF_5_USS = 0xD9
    CHECK_DIGIT_ENABLE_STANDARD_2_OF_5_OPCC = 0xDA
    CHECK_DIGIT_ENABLE_STANDARD_2_OF_5_USS = 0xDB
    CHECK_DIGIT_ENABLE_ONE_MSI_PLESSEY = 0xDC
    CHECK_DIGIT_ENABLE_TWO_MSI_PLESSEY = 0xDD
    CHECK_DIGIT_CODABAR_ENABLE = 0xDE
    CHECK_DIGIT_CODE_39_ENABLE = 0xDF
    TRANSMIT_CHECK_DIGIT = 0xF0
    DISABLE_CHECK_DIGIT_TRANSMIT = 0xF1
    ENABLE_CHECK_DIGIT_TRANSMIT = 0xF2
    SYMBOLOGY_IDENTIFIER_1 = 0xFB
    SYMBOLOGY_IDENTIFIER_2 = 0xFC
    SYMBOLOGY_IDENTIFIER_3 = 0xFD
    DECODED_DATA = 0xFE
    DECODE_DATA_CONTINUED = 0xFF
    BAR_SPACE_DATA = 0x100
    SCANNER_DATA_ACCURACY = 0x101
    RAW_DATA_POLARITY = 0x102
    POLARITY_INVERTED_BAR_CODE = 0x103
    POLARITY_NORMAL_BAR_CODE = 0x104
    MINIMUM_LENGTH_TO_DECODE = 0x106
    MAXIMUM_LENGTH_TO_DECODE = 0x107
    DISCRETE_LENGTH_TO_DECODE_1 = 0x108
    DISCRETE_LENGTH_TO_DECODE_2 = 0x109
    DATA_LENGTH_METHOD = 0x10A
    DL_METHOD_READ_ANY = 0x10B
    DL_METHOD_CHECK_IN_RANGE = 0x10C
    DL_METHOD_CHECK_FOR_DISCRETE = 0x10D
    AZTEC_CODE = 0x110
    BC412 = 0x111
    CHANNEL_CODE = 0x112
    CODE_16 = 0x113
    CODE_32 = 0x114
    CODE_49 = 0x115
    CODE_ONE = 0x116
    COLORCODE = 0x117
    DATA_MATRIX = 0x118
    MAXI_CODE = 0x119
    MICRO_PDF = 0x11A
    PDF_417 = 0x11B
    POSI_CODE = 0x11C
    QR_CODE = 0x11D
    SUPER_CODE = 0x11E
    ULTRA_CODE = 0x11F
    USD_5_SLUG_CODE = 0x120
    VERI_CODE = 0x121

    @classmethod
    def from_value(cls, value: object) -> Union["BarcodeScannerUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


# Range bounds follow the decoding table exactly, including the places
# where it differs from the range's name.
_RESERVED_RANGES = {
    "RESERVED_06_0F": range(0x06, 0x10),
    "RESERVED_20_2F": range(0x20, 0x30),
    "RESERVED_47_4C": range(0x47, 0x4D),
    "RESERVED_53_54": range(0x53, 0x54),
    "RESERVED_67_6C": range(0x66, 0x6D),
    "RESERVED_71_74": range(0x71, 0x74),
    "RESERVED_77_79": range(0x76, 0x7A),
    "RESERVED_81": range(0x81, 0x82),
    "RESERVED_8C_90": range(0x8C, 0x91),
    "RESERVED_A3_A8": range(0xA3, 0xA9),
    "RESERVED_B6": range(0xB6, 0xB7),
    "RESERVED_C1_C2": range(0xC1, 0xC3),
    "RESERVED_C5_C6": range(0xC5, 0xC7),
    "RESERVED_CF_D2": range(0xCF, 0xD3),
    "RESERVED_E0_EF": range(0xE0, 0xF0),
    "RESERVED_F3_FA": range(0xF3, 0xFB),
    "RESERVED_105": range(0x105, 0x106),
    "RESERVED_10E_10F": range(0x10E, 0x110),
    "RESERVED_122_FFFF": range(0x122, 0x10000),
}