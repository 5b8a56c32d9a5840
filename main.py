#===============================================================================
#  spwn  |  Quick Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  A single-field launcher. Typing filters the installed applications found
#  at startup; Enter launches the highlighted one. Input starting with ">" is
#  run as a command instead and its output is shown under the field.
#
#  Application Sources
#  -------------------
#    Linux   : <XDG data dirs>/applications/*.desktop
#    Windows : Start Menu\Programs (*.lnk, *.exe)
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses PySide6, which is licensed separately by its authors.
#  Ensure compliance with its license terms when distributing this software.
#===============================================================================

from spwn.app import main


if __name__ == "__main__":
    main()
