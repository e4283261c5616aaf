# hidusages

Usage IDs from the USB HID Usage Tables, one `IntEnum` per usage page.
Turn a raw 16-bit usage ID taken from a report descriptor or report into a
named usage.

## Installation

```
pip install hidusages
```

The package has no runtime dependencies.

## Usage

Each page has its own module and enum. The classmethod `from_value` maps a
raw usage ID to a member:

```python
from hidusages.keyboard import KeyboardUsage
from hidusages.digitizers import DigitizersUsage

KeyboardUsage.from_value(4)        # KeyboardUsage.KEYBOARD_A
DigitizersUsage.from_value(0x42)   # DigitizersUsage.TIP_SWITCH
```

Members are plain `IntEnum` values, so `int(member)` gives the usage ID and
`KeyboardUsage(4)` works as for any enum.

### Reserved and unnamed IDs

An ID that falls in one of a page's reserved (or otherwise unnamed) ranges
comes back as a `hidusages.usage.Reserved` value. It is a frozen dataclass
with the range's `name` and the raw `value`; it converts with `int()` and
prints as `NAME(0xHHHH)`:

```python
from hidusages.camera_control import CameraControlUsage

usage = CameraControlUsage.from_value(0x40)
usage.name    # "RESERVED_22_FFFF"
int(usage)    # 64
str(usage)    # "RESERVED_22_FFFF(0x0040)"
```

On the Button page, buttons 5 and above come back as `Reserved` values in
the range `BUTTON_5_65535`. On the Gaming Device page every ID without a
named usage comes back in the range `UNKNOWN`.

### Out-of-range and non-integer input

An integer outside `0..0xFFFF` is read as 0, the page's first usage (for
example `UNDEFINED`, or `RESERVED_00` on the Keyboard page). On the Gaming
Device page 0 has no name, so it comes back as `Reserved("UNKNOWN", 0)`.
A value that is not an integer raises `TypeError`.

The helpers behind this are in `hidusages.usage`: `to_u16(value)` applies
the rule above, and `resolve(enum_cls, ranges, value)` decodes against an
enum and a mapping of range names to `range` objects, raising `ValueError`
if no member or range matches.

### Keyboard decoding quirks

`KeyboardUsage.from_value` decodes 0x82 as `KEYBOARD_LOCKING_NUM_LOCK` and
0xD2 as `KEYPAD_CLEAR`, not as the members that carry those values
(`KEYBOARD_LOCKING_CAPS_LOCK` and `KEYPAD_MEMORY_CLEAR`).

### Keyboard labels

`hidusages.keyboard_labels` gives the characters a key types and a short
readable label:

```python
from hidusages.keyboard import KeyboardUsage
from hidusages.keyboard_labels import to_symbol, to_label, describe

key = KeyboardUsage.from_value(30)
to_symbol(key)   # ("1", "!")
to_label(key)    # "1 or !"
describe(key)    # "Key Code: 1 or !"
```

`to_symbol` returns an `(unshifted, shifted)` pair, with an empty string
where a key has no shifted character, or `None` for keys that type nothing
(and for `Reserved` values). `to_label` returns an empty string for usages
without a label.

## Pages

| Module | Enum | Page |
| --- | --- | --- |
| `game_controls` | `GameControlsUsage` | 0x05 |
| `generic_device_controls` | `GenericDeviceControlsUsage` | 0x06 |
| `keyboard` | `KeyboardUsage` | 0x07 |
| `led` | `LedUsage` | 0x08 |
| `button` | `ButtonUsage` | 0x09 |
| `digitizers` | `DigitizersUsage` | 0x0D |
| `haptics` | `HapticsUsage` | 0x0E |
| `eye_and_head_trackers` | `EyeAndHeadTrackersUsage` | 0x12 |
| `auxiliary_display` | `AuxiliaryDisplayUsage` | 0x14 |
| `medical_instrument` | `MedicalInstrumentUsage` | 0x40 |
| `lighting_and_illumination` | `LightingAndIlluminationUsage` | 0x59 |
| `monitor` | `MonitorUsage` | 0x80 |
| `barcode_scanner` | `BarcodeScannerUsage` | 0x8C |
| `magnetic_stripe_reader` | `MagneticStripeReaderUsage` | 0x8E |
| `camera_control` | `CameraControlUsage` | 0x90 |
| `arcade` | `ArcadeUsage` | 0x91 |
| `gaming_device` | `GamingDeviceUsage` | |
| `fast_identify_online_alliance` | `FIDOUsage` | 0xF1D0 |

## What it does not do

Only the pages in the table above are included; other pages of the HID
Usage Tables have no module here. The package only maps usage IDs to
names: it does not parse report descriptors or reports, does not map usage
page numbers to modules, and does not talk to devices.

## Tests

```
pip install -e ".[test]"
pytest
```