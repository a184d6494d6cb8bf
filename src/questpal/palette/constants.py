#!/usr/bin/env python3

# Quest format compatibility table. Values are fixed by files already in
# the wild and must not be recomputed.

FORMAT_THRESHOLD = 0x192
BUILD_EXTENDED_COLORS = 73
BUILD_PALETTE_NAMES = 76
SUBVERSION_512_NAMES = 3
SUBVERSION_NEWER_SPRITES = 4

# 16 colors, 3 channels each
RECORD_SIZE = 48
COLORS_PER_RECORD = 16

PALNAMESIZE = 17
OLDMAXLEVELS = 256
MAXLEVELS = 512
NEW_PALNAMES = 512

# record offsets into the flat color table
poFULL = 0
poLEVEL = poFULL + 15
oldpoSPRITE = 210
newpoSPRITE = 3343
newerpoSPRITE = 6671

# record counts
pdLEVEL = 13
pdSPRITE = 30
oldpdTOTAL = 240
newpdTOTAL = 3373
newerpdTOTAL = 6701

# legacy relocations move the whole sprite block
SPRITE_BLOCK = 30

CYCLE_INDICES = 256
CYCLE_SLOTS = 3
