from version_checker.cli import main

raise SystemExit(main())
