"""
Fixed manifest template for an NFS provisioner backed by an OpenEBS volume.

Placeholders are ManifestParameterRecord field names.
"""

MANIFEST_TEMPLATE = """\
apiVersion: extensions/v1beta1
kind: PodSecurityPolicy
metadata:
  name: {{ provisioner_stateful_name }}
spec:
  fsGroup:
    rule: RunAsAny
  allowedCapabilities:
  - DAC_READ_SEARCH
  - SYS_RESOURCE
  runAsUser:
    rule: RunAsAny
  seLinux:
    rule: RunAsAny
  supplementalGroups:
    rule: RunAsAny
  volumes:
  - configMap
  - downwardAPI
  - emptyDir
  - persistentVolumeClaim
  - secret
  - hostPath
---
kind: ClusterRole
apiVersion: rbac.authorization.k8s.io/v1
metadata:
  name: {{ nfs_cluster_role_name }}
rules:
  - apiGroups: [""]
    resources: ["persistentvolumes"]
    verbs: ["get", "list", "watch", "create", "delete"]
  - apiGroups: [""]
    resources: ["persistentvolumeclaims"]
    verbs: ["get", "list", "watch", "update"]
  - apiGroups: ["storage.k8s.io"]
    resources: ["storageclasses"]
    verbs: ["get", "list", "watch"]
  - apiGroups: [""]
    resources: ["events"]
    verbs: ["create", "update", "patch"]
  - apiGroups: [""]
    resources: ["services", "endpoints"]
    verbs: ["get"]
  - apiGroups: ["extensions"]
    resources: ["podsecuritypolicies"]
    resourceNames: ["nfs-provisioner"]
    verbs: ["use"]
---
kind: ClusterRoleBinding
apiVersion: rbac.authorization.k8s.io/v1
metadata:
  name: {{ nfs_cluster_role_binding_name }}
subjects:
  - kind: ServiceAccount
    name: {{ provisioner_stateful_name }}
    # replace with namespace where provisioner is deployed
    namespace: default
roleRef:
  kind: ClusterRole
  name: {{ nfs_cluster_role_name }}
  apiGroup: rbac.authorization.k8s.io
---
kind: Role
apiVersion: rbac.authorization.k8s.io/v1
metadata:
  name: {{ nfs_role_name }}
rules:
  - apiGroups: [""]
    resources: ["endpoints"]
    verbs: ["get", "list", "watch", "create", "update", "patch"]
---
kind: RoleBinding
apiVersion: rbac.authorization.k8s.io/v1
metadata:
  name: {{ nfs_role_name }}
subjects:
  - kind: ServiceAccount
    name: {{ provisioner_stateful_name }}
    # replace with namespace where provisioner is deployed
roleRef:
  kind: Role
  name: {{ nfs_role_name }}
  apiGroup: rbac.authorization.k8s.io
---
apiVersion: v1
kind: ServiceAccount
metadata:
  name: {{ provisioner_stateful_name }}
---
kind: Service
apiVersion: v1
metadata:
  name: {{ provisioner_stateful_name }}
  labels:
    app: {{ provisioner_stateful_name }}
spec:
  ports:
    - name: nfs
      port: 2049
    - name: mountd
      port: 20048
    - name: rpcbind
      port: 111
    - name: rpcbind-udp
      port: 111
      protocol: UDP
  selector:
    app: {{ provisioner_stateful_name }}
---
kind: Deployment
apiVersion: apps/v1
metadata:
  name: {{ provisioner_stateful_name }}
spec:
  selector:
    matchLabels:
      app: {{ provisioner_stateful_name }}
  replicas: 1
  strategy:
    type: Recreate
  template:
    metadata:
      labels:
        app: {{ provisioner_stateful_name }}
    spec:
      serviceAccount: {{ provisioner_stateful_name }}
      terminationGracePeriodSeconds: 10
      containers:
        - name: {{ provisioner_stateful_name }}
          image: quay.io/kubernetes_incubator/nfs-provisioner:latest
          ports:
            - name: nfs
              containerPort: 2049
            - name: mountd
              containerPort: 20048
            - name: rpcbind
              containerPort: 111
            - name: rpcbind-udp
              containerPort: 111
              protocol: UDP
          securityContext:
            capabilities:
              add:
                - DAC_READ_SEARCH
                - SYS_RESOURCE
          args:
            - "-provisioner={{ provisioner_name }}"
          env:
            - name: POD_IP
              valueFrom:
                fieldRef:
                  fieldPath: status.podIP
            - name: SERVICE_NAME
              value: {{ provisioner_stateful_name }}
            - name: POD_NAMESPACE
              valueFrom:
                fieldRef:
                  fieldPath: metadata.namespace
          imagePullPolicy: "IfNotPresent"
          volumeMounts:
            - name: export-volume
              mountPath: /export
      volumes:
      - name: export-volume
        persistentVolumeClaim:
          claimName: {{ openebs_pvc_name }}
---
kind: PersistentVolumeClaim
apiVersion: v1
metadata:
  name: {{ openebs_pvc_name }}
spec:
  storageClassName: "{{ openebs_storage_class }}"
  accessModes:
    - ReadWriteOnce
  resources:
    requests:
      storage: "{{ openebs_storage_size }}"
---
kind: StorageClass
apiVersion: storage.k8s.io/v1
metadata:
  name: {{ nfs_storage_class }}
provisioner: {{ provisioner_name }}
parameters:
  mountOptions: "vers=4.1"
---
kind: PersistentVolumeClaim
apiVersion: v1
metadata:
  name: {{ nfs_pvc_name }}
  annotations:
    volume.beta.kubernetes.io/storage-class: "{{ nfs_storage_class }}"
spec:
  accessModes:
    - {{ nfs_access_mode }}
  resources:
    requests:
      storage: {{ nfs_storage_size }}
"""
