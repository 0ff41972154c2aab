from breadpy.cli import main

raise SystemExit(main())
