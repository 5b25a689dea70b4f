from smt_enumerate.cli import main

raise SystemExit(main())
