from bytary.cli import main

raise SystemExit(main())
