from splitmap.cli import main

raise SystemExit(main())
