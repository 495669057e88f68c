from densesolve.main import main

raise SystemExit(main())
