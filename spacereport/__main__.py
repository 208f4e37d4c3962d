from spacereport.cli import main

raise SystemExit(main())
