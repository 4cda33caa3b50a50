from baybayin_engine.cli import main

raise SystemExit(main())
