from loa.app import main

raise SystemExit(main())
