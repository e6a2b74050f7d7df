#!/usr/bin/env python3
"""
Render text to an image using a BMFont bitmap font
(c) 2019--2023 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

from bmfont.scripts.banner import main


if __name__ == '__main__':
    main()
